"""Formatting resolved files for a prompt."""

import json
from collections.abc import Sequence

from .resolver import ResolvedFile


def md_codeblock(lang: str, content: str) -> str:
    """Wrap content in a markdown codeblock."""
    # we use quadruple backticks to avoid conflicts with triple backticks in the content
    return f"````{lang}\n{content}\n````"


def format_markdown(files: Sequence[ResolvedFile]) -> str:
    return "\n\n".join(md_codeblock(f.path, f.content) for f in files)


def format_json(files: Sequence[ResolvedFile]) -> str:
    return json.dumps([f.to_dict() for f in files], indent=2)
