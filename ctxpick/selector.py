"""The file selector: selection state, sources, pickers and content resolution
for one assistant session.

Example:
    from ctxpick import FileSelector

    selector = FileSelector(1)
    selector.on("update", lambda: print(selector.get_selected_filepaths()))
    selector.add_selected_file("README.md")
    selector.add_selected_file_ranges("ctxpick/store.py", "1-20")
    for f in selector.get_selected_files_contents():
        print(f.path, f.file_type)
"""

import logging
from concurrent.futures import Future
from pathlib import Path

from .config import Config, get_config
from .editor import Editor, TerminalEditor
from .events import EventBus, EventCallback, EventType
from .paths import get_project_root, scan_workspace_files
from .pickers import PickerConfigError, Scheduler, get_picker, run_now
from .ranges import LineRange
from .resolver import ResolvedFile, resolve
from .sources import (
    CurrentDocumentAdapter,
    PickerResultAdapter,
    QuickfixAdapter,
    ToggleResult,
)
from .store import SelectionStore
from .util import notify_error

logger = logging.getLogger(__name__)


class FileSelector:
    def __init__(
        self,
        id: int = 0,
        editor: Editor | None = None,
        config: Config | None = None,
        scheduler: Scheduler | None = None,
        root: Path | None = None,
    ):
        self.id = id
        self.root = root or (config and config.workspace) or get_project_root()
        self.editor = editor or TerminalEditor(root=self.root)
        self._config = config
        self.scheduler = scheduler or run_now
        self.events = EventBus()
        self.store = SelectionStore(self.events, root=self.root)
        self.file_cache: list[str] = []

    @property
    def config(self) -> Config:
        return self._config or get_config()

    # events

    def on(self, event: EventType | str, callback: EventCallback) -> None:
        self.events.subscribe(event, callback)

    def off(self, event: EventType | str, callback: EventCallback | None = None) -> None:
        self.events.unsubscribe(event, callback)

    def emit(self, event: EventType | str, *args) -> None:
        self.events.publish(event, *args)

    # selection

    def add_selected_file(self, filepath: str | Path | None) -> bool:
        return self.store.add_path(filepath)

    def add_selected_file_ranges(
        self, filepath: str | Path | None, file_range: "str | LineRange"
    ) -> None:
        self.store.add_path_range(filepath, file_range)

    def remove_selected_filepaths(self, idx: int) -> bool:
        return self.store.remove_at(idx)

    def get_selected_filepaths(self) -> list[str]:
        return self.store.snapshot_paths()

    def reset(self) -> None:
        self.store.reset()

    def toggle_current_document(self) -> ToggleResult:
        """Add the active document, or remove it if it's already selected."""
        return CurrentDocumentAdapter(self.store, self.editor).toggle()

    def add_quickfix_files(self) -> int:
        return QuickfixAdapter(self.store, self.editor).add_all()

    # pickers

    def update_file_cache(self) -> None:
        self.file_cache = scan_workspace_files(self.root)
        logger.debug(f"File cache: {len(self.file_cache)} files under {self.root}")

    def open(self) -> "Future[str | None] | None":
        """Show the configured picker and add the chosen file.

        Returns a future resolved with the chosen path (None if cancelled)
        once the selection has been updated, or None if the picker couldn't
        be opened.
        """
        selector_config = self.config.selector
        provider = selector_config.provider
        if provider == "native":
            self.update_file_cache()

        try:
            picker = get_picker(provider, selector_config, self.file_cache, self.root)
        except PickerConfigError as e:
            notify_error(str(e))
            return None

        future: Future[str | None] = Future()
        apply_choice = PickerResultAdapter(self.store, picker.exclusion_is_strict)

        def on_choice(path: str | None) -> None:
            try:
                apply_choice(path)
            except Exception as e:
                future.set_exception(e)
            else:
                future.set_result(path)

        self.scheduler(lambda: picker.pick_one(self.store.snapshot_paths(), on_choice))
        return future

    # content

    def get_selected_files_contents(self) -> list[ResolvedFile]:
        return resolve(
            self.store.snapshot_paths(), self.store.ranges_by_path, root=self.root
        )
