"""Base abstractions for picker back-ends.

A picker shows candidate files and returns at most one chosen path. Pickers
are run through a :data:`Scheduler`, so the result arrives via a callback
rather than a return value.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

OnChoice = Callable[[str | None], None]
Scheduler = Callable[[Callable[[], None]], None]


class PickerConfigError(Exception):
    """Raised for an unknown provider or a back-end that isn't installed."""


def run_now(job: Callable[[], None]) -> None:
    """Scheduler that runs the job immediately on the caller's thread."""
    job()


def run_in_thread(job: Callable[[], None]) -> None:
    """Scheduler that runs the job in a background thread."""
    thread = threading.Thread(target=job, daemon=True, name="ctxpick-picker")
    thread.start()


class Picker(ABC):
    """Base class for picker back-ends.

    Subclasses implement :meth:`choose`. :meth:`pick_one` guarantees the
    callback is called exactly once, with None if the user cancelled or the
    back-end failed.

    ``exclusion_is_strict`` states whether the back-end can never return an
    excluded path (True), or only uses exclusions to filter what it displays
    (False).
    """

    name: str = ""
    exclusion_is_strict: bool = False
    install_hint: str = ""

    @classmethod
    def is_available(cls) -> bool:
        return True

    @abstractmethod
    def choose(self, exclusions: Sequence[str]) -> str | None:
        """Show the picker and return the chosen path, or None if cancelled."""

    def pick_one(self, exclusions: Sequence[str], on_choice: OnChoice) -> None:
        choice: str | None = None
        try:
            choice = self.choose(list(exclusions)) or None
        except (KeyboardInterrupt, EOFError):
            logger.debug(f"Picker '{self.name}' interrupted")
        except Exception:
            logger.exception(f"Error in picker '{self.name}'")
        on_choice(choice)
