from pathlib import Path

import pytest

from ctxpick.config import set_config


@pytest.fixture(autouse=True)
def clear_config(monkeypatch):
    """Don't let a config from one test (or the environment) leak into another."""
    monkeypatch.delenv("CTXPICK_PROVIDER", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A small project with a marker file, so it is its own project root."""
    (tmp_path / "ctxpick.toml").write_text('[selector]\nprovider = "native"\n')
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("import os\n\nprint(os.getcwd())\n")
    (tmp_path / "src" / "util.py").write_text("def helper():\n    return 1\n")
    (tmp_path / "README.md").write_text("# Project\n\nSome docs.\n")
    (tmp_path / "letters.txt").write_text("a\nb\nc\nd\ne\n")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "secret.txt").write_text("hidden\n")
    return tmp_path
