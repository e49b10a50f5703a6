"""Picker that runs the fzf binary."""

import logging
import shutil
import subprocess
from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path

from ..config import FzfOptions
from ..paths import scan_workspace_files
from .base import Picker

logger = logging.getLogger(__name__)

# fzf exit codes: 1 = no match, 130 = interrupted with ctrl-c/esc
FZF_CANCELLED = (1, 130)


class FzfPicker(Picker):
    """Fuzzy-find a workspace file with fzf.

    Exclusions are applied as glob patterns to the list fed into fzf. A path
    containing glob metacharacters doesn't match itself as a pattern, so an
    already-selected path can still come back.
    """

    name = "fzf"
    install_hint = "install fzf from https://github.com/junegunn/fzf"
    exclusion_is_strict = False

    def __init__(self, options: FzfOptions, root: Path):
        self.options = options
        self.root = root

    @classmethod
    def is_available(cls) -> bool:
        return shutil.which("fzf") is not None

    def candidates(self, exclusions: Sequence[str]) -> list[str]:
        return [
            f
            for f in scan_workspace_files(self.root)
            if not any(fnmatch(f, pattern) for pattern in exclusions)
        ]

    def command(self) -> list[str]:
        return [
            "fzf",
            "--prompt",
            self.options.prompt,
            "--height",
            self.options.height,
            *self.options.extra_args,
        ]

    def choose(self, exclusions: Sequence[str]) -> str | None:
        p = subprocess.run(
            self.command(),
            input="\n".join(self.candidates(exclusions)),
            stdout=subprocess.PIPE,
            text=True,
            cwd=self.root,
        )
        if p.returncode in FZF_CANCELLED:
            return None
        if p.returncode != 0:
            logger.warning(f"fzf exited with code {p.returncode}")
            return None
        return p.stdout.strip() or None
