"""Path canonicalisation and workspace scanning.

Every path stored by the selector goes through :func:`uniform_path`, which is
the single equality key for membership checks.
"""

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_MARKERS = ("ctxpick.toml", ".git")


def get_project_root(start: Path | None = None) -> Path:
    """
    Walk up from ``start`` (default: the working dir) to find the project root,
    which is the first directory containing a ``ctxpick.toml`` or a git repo.

    Falls back to ``start`` itself if no marker is found.
    """
    start = (start or Path.cwd()).absolute()
    path = start
    while True:
        if any((path / marker).exists() for marker in PROJECT_MARKERS):
            return path
        if path.parent == path:
            return start
        path = path.parent


def uniform_path(path: str | Path, root: Path | None = None) -> str:
    """Canonicalise a path.

    Relative paths are taken relative to the project root. Paths inside the
    root come back relative to it, anything else comes back absolute. Both use
    forward slashes. Applying the function to its own output is a no-op.
    """
    root = Path(os.path.normpath((root or get_project_root()).absolute()))
    p = Path(os.path.expanduser(str(path)))
    if not p.is_absolute():
        p = root / p
    p = Path(os.path.normpath(p))
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return p.as_posix()


def scan_workspace_files(root: Path) -> list[str]:
    """List the files in a workspace, relative to ``root`` and sorted.

    Uses git so ignored files are skipped; outside a repo, walks the tree and
    skips hidden files and directories.
    """
    files: list[str] = []
    try:
        p = subprocess.run(
            ["git", "ls-files", "--cached", "--others", "--exclude-standard"],
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
        )
        files = [f for f in p.stdout.splitlines() if (root / f).is_file()]
    except (OSError, subprocess.CalledProcessError):
        logger.debug(f"git ls-files failed in {root}, walking the tree instead")
        files = [
            f.relative_to(root).as_posix()
            for f in root.rglob("*")
            if f.is_file()
            and not any(part.startswith(".") for part in f.relative_to(root).parts)
        ]
    return sorted(set(files))
