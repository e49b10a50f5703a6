"""Tests for path canonicalisation and workspace scanning."""

from pathlib import Path

import pytest

from ctxpick.paths import get_project_root, scan_workspace_files, uniform_path


@pytest.mark.parametrize(
    "spelling",
    ["src/app.py", "./src/app.py", "src//app.py", "src/../src/app.py", "src/./app.py"],
)
def test_uniform_path_relative_spellings(tmp_path, spelling):
    assert uniform_path(spelling, tmp_path) == "src/app.py"


def test_uniform_path_absolute_inside_root(tmp_path):
    assert uniform_path(tmp_path / "src" / "app.py", tmp_path) == "src/app.py"


def test_uniform_path_outside_root(tmp_path):
    outside = tmp_path.parent / "other" / "file.py"
    assert uniform_path(outside, tmp_path) == outside.as_posix()
    assert uniform_path("../other/file.py", tmp_path) == outside.as_posix()


def test_uniform_path_is_idempotent(tmp_path):
    for path in ["a/b.py", "./x/../y.py", str(tmp_path.parent / "z.py")]:
        once = uniform_path(path, tmp_path)
        assert uniform_path(once, tmp_path) == once


def test_uniform_path_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert uniform_path("~/notes.md", tmp_path) == "notes.md"


def test_get_project_root(workspace):
    nested = workspace / "src"
    assert get_project_root(nested) == workspace
    assert get_project_root(workspace) == workspace


def test_get_project_root_git(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "a" / "b").mkdir(parents=True)

    assert get_project_root(tmp_path / "a" / "b") == tmp_path


def test_scan_workspace_files_skips_hidden(workspace: Path):
    files = scan_workspace_files(workspace)

    assert files == sorted(files)
    assert "src/app.py" in files
    assert "README.md" in files
    assert ".hidden/secret.txt" not in files
