"""Adapters that feed paths from different sources into a :class:`SelectionStore`."""

import logging
from enum import Enum

from .editor import Editor
from .store import SelectionStore

logger = logging.getLogger(__name__)


class ToggleResult(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    IGNORED = "ignored"


class QuickfixAdapter:
    """Select every file referenced by the editor's quickfix list."""

    def __init__(self, store: SelectionStore, editor: Editor):
        self.store = store
        self.editor = editor

    def add_all(self) -> int:
        """Add quickfix files in list order. Returns how many were newly selected."""
        paths = [
            self.editor.relative_path(entry.document)
            for entry in self.editor.quickfix_list()
            if entry.document is not None
        ]
        added = sum(1 for path in paths if self.store.add_path(path))
        logger.debug(f"Quickfix: {len(paths)} entries, {added} new files")
        return added


class CurrentDocumentAdapter:
    """Toggle the editor's active document in the selection."""

    def __init__(self, store: SelectionStore, editor: Editor):
        self.store = store
        self.editor = editor

    def toggle(self) -> ToggleResult:
        document = self.editor.current_document()
        if document is None or not document.name or document.is_synthetic:
            return ToggleResult.IGNORED

        if self.store.toggle_path(self.editor.relative_path(document)):
            return ToggleResult.ADDED
        return ToggleResult.REMOVED


class PickerResultAdapter:
    """Completion callback for a picker: apply the chosen path to the store.

    The native picker never offers paths that are already selected, so its
    result is appended directly. Other pickers only use the selection as a
    display hint, so their result goes through the duplicate check.
    """

    def __init__(self, store: SelectionStore, strict_exclusion: bool):
        self.store = store
        self.strict_exclusion = strict_exclusion

    def __call__(self, path: str | None) -> None:
        if not path:
            logger.debug("Picker closed without a selection")
            return
        if self.strict_exclusion:
            self.store.append_path_unchecked(path)
        else:
            self.store.add_path(path)
