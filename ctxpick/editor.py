"""Editor collaborator: the active document and the quickfix list.

The selector only talks to the :class:`Editor` protocol. :class:`TerminalEditor`
is the implementation used from the command line, where the "active document"
is given explicitly and the quickfix list is read from an errorformat file
(``path:line[:col]: message``, as produced by compilers, linters and grep -n).
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .paths import get_project_root, uniform_path

logger = logging.getLogger(__name__)

# Documents whose name starts with this scheme are the assistant's own UI
# buffers, not files on disk.
SYNTHETIC_SCHEME = "ctxpick://"

QUICKFIX_PATTERN = re.compile(
    r"^(?P<path>[^:\n]+):(?P<lnum>\d+)(?::(?P<col>\d+))?:?\s?(?P<text>.*)$"
)


@dataclass(frozen=True)
class Document:
    """Handle for a document open in the editor."""

    name: str

    @property
    def is_synthetic(self) -> bool:
        return self.name.startswith(SYNTHETIC_SCHEME)


@dataclass
class QuickfixEntry:
    """One item in the quickfix list. ``document`` is None for unparsed lines."""

    document: Document | None
    lnum: int = 0
    col: int = 0
    text: str = ""


class Editor(Protocol):
    def current_document(self) -> Document | None: ...

    def quickfix_list(self) -> list[QuickfixEntry]: ...

    def relative_path(self, document: Document) -> str: ...


def parse_quickfix(text: str) -> list[QuickfixEntry]:
    """Parse errorformat lines. Lines that don't match become entries without a document."""
    entries = []
    for line in text.splitlines():
        if m := QUICKFIX_PATTERN.match(line):
            entries.append(
                QuickfixEntry(
                    document=Document(m.group("path")),
                    lnum=int(m.group("lnum")),
                    col=int(m.group("col") or 0),
                    text=m.group("text"),
                )
            )
        else:
            entries.append(QuickfixEntry(document=None, text=line))
    return entries


@dataclass
class TerminalEditor:
    """Editor state held in memory, for use outside an editor."""

    root: Path = field(default_factory=get_project_root)
    current: Document | None = None
    quickfix: list[QuickfixEntry] = field(default_factory=list)

    def set_current(self, path: str | Path | None) -> None:
        self.current = Document(str(path)) if path else None

    def load_quickfix(self, path: Path) -> int:
        """Replace the quickfix list with the entries of an errorformat file."""
        self.quickfix = parse_quickfix(path.read_text())
        logger.info(f"Loaded {len(self.quickfix)} quickfix entries from {path}")
        return len(self.quickfix)

    def current_document(self) -> Document | None:
        return self.current

    def quickfix_list(self) -> list[QuickfixEntry]:
        return list(self.quickfix)

    def relative_path(self, document: Document) -> str:
        return uniform_path(document.name, self.root)
