from .__version__ import __version__
from .editor import Document, Editor, QuickfixEntry, TerminalEditor
from .events import EventBus, EventType
from .ranges import WHOLE, LineSpan, RangeError, parse_range
from .resolver import ResolvedFile, resolve
from .selector import FileSelector
from .store import SelectionStore

__all__ = [
    "FileSelector",
    "SelectionStore",
    "EventBus",
    "EventType",
    "WHOLE",
    "LineSpan",
    "RangeError",
    "parse_range",
    "ResolvedFile",
    "resolve",
    "Document",
    "Editor",
    "QuickfixEntry",
    "TerminalEditor",
    "__version__",
]
