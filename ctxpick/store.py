"""Selection state: the ordered set of selected paths and their line ranges."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from .events import EventBus, EventType
from .paths import uniform_path
from .ranges import WHOLE, LineRange, parse_range

logger = logging.getLogger(__name__)


class SelectionStore:
    """Authoritative selection state for one selector.

    ``selected_paths`` keeps insertion order and never holds a path twice.
    ``ranges_by_path`` maps a path to the ranges requested for it; a selected
    path without an entry means the whole file.

    Every call that changes state publishes :attr:`EventType.UPDATE` once per
    change, calls that change nothing publish nothing.

    Removing a path keeps its recorded ranges, so adding the path back restores
    them. This grows by at most one entry per path ever selected in the session.
    """

    def __init__(
        self,
        events: EventBus | None = None,
        root: Path | None = None,
        normalize: Callable[[str], str] | None = None,
    ):
        self.events = events or EventBus()
        self.root = root
        self._normalize = normalize or (lambda p: uniform_path(p, self.root))
        self.selected_paths: list[str] = []
        self.ranges_by_path: dict[str, list[LineRange]] = {}

    def _emit_update(self) -> None:
        self.events.publish(EventType.UPDATE)

    def add_path(self, path: str | Path | None) -> bool:
        """Append a path unless it is empty or already selected. Returns True if added."""
        if not path:
            return False
        uniform = self._normalize(str(path))
        if uniform in self.selected_paths:
            return False
        self.selected_paths.append(uniform)
        logger.debug(f"Selected {uniform}")
        self._emit_update()
        return True

    def add_path_range(
        self, path: str | Path | None, file_range: "str | LineRange"
    ) -> None:
        """Record a line range for a path, selecting the path if needed.

        ``""`` (or :data:`WHOLE`) is always appended, even if already present.
        A line span is appended only if an equal span is not recorded yet.
        """
        if not path:
            return
        parsed = parse_range(file_range)
        uniform = self._normalize(str(path))

        ranges = self.ranges_by_path.setdefault(uniform, [])
        if parsed is WHOLE or parsed not in ranges:
            ranges.append(parsed)
            self._emit_update()

        if uniform not in self.selected_paths:
            self.selected_paths.append(uniform)
            self._emit_update()

    def append_path_unchecked(self, path: str | Path) -> None:
        """Append a path without the duplicate check.

        Only for sources that already excluded the selected paths.
        """
        self.selected_paths.append(self._normalize(str(path)))
        self._emit_update()

    def toggle_path(self, path: str | Path) -> bool:
        """Remove the path if selected, otherwise add it. Returns True if it was added."""
        uniform = self._normalize(str(path))
        if uniform in self.selected_paths:
            self.selected_paths.remove(uniform)
            self._emit_update()
            return False
        return self.add_path(uniform)

    def remove_at(self, index: int) -> bool:
        """Remove the path at 1-based ``index``. Returns False if out of range."""
        if 0 < index <= len(self.selected_paths):
            removed = self.selected_paths.pop(index - 1)
            logger.debug(f"Deselected {removed}")
            self._emit_update()
            return True
        return False

    def remove_path(self, path: str | Path) -> bool:
        """Remove a path by value. Returns False if it was not selected."""
        uniform = self._normalize(str(path))
        if uniform not in self.selected_paths:
            return False
        return self.remove_at(self.selected_paths.index(uniform) + 1)

    def reset(self) -> None:
        """Clear paths, ranges and subscriptions. Publishes nothing."""
        self.selected_paths = []
        self.ranges_by_path = {}
        self.events.clear()

    def snapshot_paths(self) -> list[str]:
        return list(self.selected_paths)

    def ranges_for(self, path: str | Path) -> list[LineRange]:
        return list(self.ranges_by_path.get(self._normalize(str(path)), []))

    def __len__(self) -> int:
        return len(self.selected_paths)

    def __contains__(self, path: object) -> bool:
        return (
            isinstance(path, str | Path)
            and self._normalize(str(path)) in self.selected_paths
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot_paths())
