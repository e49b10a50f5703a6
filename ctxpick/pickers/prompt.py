"""Picker that reads a path with prompt_toolkit fuzzy completion."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..config import PromptToolkitOptions
from ..paths import scan_workspace_files
from .base import Picker

logger = logging.getLogger(__name__)


class PromptToolkitPicker(Picker):
    """Type a path with fuzzy completion over the workspace files.

    Excluded paths are left out of the completions, but the user can still
    type one in.
    """

    name = "prompt_toolkit"
    exclusion_is_strict = False

    def __init__(self, options: PromptToolkitOptions, root: Path):
        self.options = options
        self.root = root

    def completions(self, exclusions: Sequence[str]) -> list[str]:
        excluded = set(exclusions)
        return [f for f in scan_workspace_files(self.root) if f not in excluded]

    def choose(self, exclusions: Sequence[str]) -> str | None:
        from prompt_toolkit import prompt
        from prompt_toolkit.completion import FuzzyWordCompleter

        completer = FuzzyWordCompleter(self.completions(exclusions), WORD=True)
        answer = prompt(
            self.options.prompt,
            completer=completer,
            complete_while_typing=self.options.complete_while_typing,
        )
        return answer.strip() or None
