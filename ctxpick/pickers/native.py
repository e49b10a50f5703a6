"""Built-in list picker over the selector's scanned file cache."""

import logging
from collections.abc import Sequence

from ..config import NativeOptions
from ..util import console
from .base import Picker

logger = logging.getLogger(__name__)


class NativePicker(Picker):
    """Select from the file cache with questionary.

    Already-selected paths are removed from the candidates, so the result is
    never a duplicate.
    """

    name = "native"
    exclusion_is_strict = True

    def __init__(self, options: NativeOptions, file_cache: Sequence[str]):
        self.options = options
        self.file_cache = file_cache

    def candidates(self, exclusions: Sequence[str]) -> list[str]:
        excluded = set(exclusions)
        return [f for f in self.file_cache if f not in excluded]

    def choose(self, exclusions: Sequence[str]) -> str | None:
        import questionary

        candidates = self.candidates(exclusions)
        if not candidates:
            console.print("[yellow]No more files to add.[/yellow]")
            return None
        return questionary.select(self.options.prompt, choices=candidates).ask()
