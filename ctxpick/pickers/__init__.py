"""Interchangeable picker back-ends.

Example:
    from ctxpick.pickers import get_picker

    picker = get_picker("fzf", config.selector, file_cache=[], root=root)
    picker.pick_one(exclusions=selected, on_choice=print)
"""

from collections.abc import Sequence
from pathlib import Path

from ..config import SelectorConfig
from ..constants import PROVIDERS
from .base import (
    OnChoice,
    Picker,
    PickerConfigError,
    Scheduler,
    run_in_thread,
    run_now,
)
from .fzf import FzfPicker
from .native import NativePicker
from .prompt import PromptToolkitPicker

__all__ = [
    "Picker",
    "PickerConfigError",
    "OnChoice",
    "Scheduler",
    "run_now",
    "run_in_thread",
    "NativePicker",
    "FzfPicker",
    "PromptToolkitPicker",
    "get_picker",
]


def get_picker(
    provider: str,
    config: SelectorConfig,
    file_cache: Sequence[str],
    root: Path,
) -> Picker:
    """Build the picker for a provider.

    Raises:
        PickerConfigError: if the provider is unknown or its back-end is missing
    """
    picker: Picker
    if provider == "native":
        picker = NativePicker(config.native, file_cache)
    elif provider == "fzf":
        picker = FzfPicker(config.fzf, root)
    elif provider == "prompt_toolkit":
        picker = PromptToolkitPicker(config.prompt_toolkit, root)
    else:
        raise PickerConfigError(
            f"Unknown file selector provider: {provider} (expected one of {', '.join(PROVIDERS)})"
        )

    if not picker.is_available():
        raise PickerConfigError(
            f"{provider} is not available, {picker.install_hint} to use it as a file selector."
        )
    return picker
