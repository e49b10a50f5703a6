"""Turn a selection into file contents."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .ranges import WHOLE, LineRange, LineSpan, RangeError, parse_range

logger = logging.getLogger(__name__)

UNKNOWN_FILETYPE = "unknown"


@dataclass(frozen=True)
class ResolvedFile:
    """Content of one selected file, ready for a prompt builder."""

    path: str
    content: str
    file_type: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def detect_filetype(path: str | Path, content: str | None = None) -> str:
    """Best-effort file type from the file name (and content, for ambiguous names)."""
    try:
        lexer = get_lexer_for_filename(Path(path).name, content)
    except ClassNotFound:
        return UNKNOWN_FILETYPE
    return lexer.aliases[0] if lexer.aliases else lexer.name.lower()


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping {path}: {e}")
        return None


def _split_lines(text: str) -> list[str]:
    # only "\n" ends a line; form feeds and unicode separators stay in the text
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _select_lines(lines: list[str], ranges: Sequence[LineRange | str]) -> str:
    selected: list[str] = []
    for r in ranges:
        try:
            span = parse_range(r)
        except RangeError:
            logger.debug(f"Ignoring unparseable range {r!r}")
            continue
        if isinstance(span, LineSpan):
            selected.extend(span.select(lines))
    return "\n".join(selected)


def resolve(
    selected_paths: Sequence[str],
    ranges_by_path: Mapping[str, Sequence[LineRange | str]],
    root: Path | None = None,
) -> list[ResolvedFile]:
    """Read each selected file and extract the requested content.

    Files that cannot be read are left out. Any :data:`WHOLE` range makes the
    whole file the content; otherwise the spans are concatenated in the order
    they were recorded, overlapping spans repeating their lines.
    """
    root = root or Path.cwd()
    contents: list[ResolvedFile] = []
    for file_path in selected_paths:
        text = _read_text(root / file_path)
        if text is None:
            continue
        lines = _split_lines(text)
        file_type = detect_filetype(file_path, text)
        ranges = ranges_by_path.get(file_path) or [WHOLE]

        if any(r is WHOLE or r == "" for r in ranges):
            content = "\n".join(lines)
        else:
            content = _select_lines(lines, ranges)
        contents.append(ResolvedFile(path=file_path, content=content, file_type=file_type))
    logger.debug(f"Resolved {len(contents)} of {len(selected_paths)} selected files")
    return contents
