from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from folder_timestamps.paths import (
    is_absolute_style,
    is_valid_directory,
    normalize_path,
    unify_separators,
)


def test_relative_existing_path_resolves_to_absolute(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "project").mkdir()
    monkeypatch.chdir(tmp_path)

    normalized = normalize_path("project")

    assert normalized == os.path.realpath(tmp_path / "project")
    assert os.path.isabs(normalized)


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_symlinked_root_resolves_to_target(tmp_path: Path) -> None:
    (tmp_path / "target").mkdir()
    (tmp_path / "link").symlink_to(tmp_path / "target", target_is_directory=True)

    assert normalize_path(str(tmp_path / "link")) == os.path.realpath(tmp_path / "target")


def test_unresolvable_relative_path_falls_back_to_cwd_join(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    normalized = normalize_path("not-there")

    assert normalized == os.path.join(os.getcwd(), "not-there")


def test_unresolvable_absolute_path_is_kept(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing" / "deeper")

    assert normalize_path(missing) == missing


def test_windows_style_separators_unify_to_backslash() -> None:
    assert unify_separators("C:/Users/me\\docs", sep="\\", altsep="/") == r"C:\Users\me\docs"


def test_posix_separators_are_left_alone_without_altsep() -> None:
    assert unify_separators("/srv/data/a\\b", sep="/", altsep=None) == "/srv/data/a\\b"


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("/usr/local", True),
        ("C:\\Users", True),
        ("d:/data", True),
        ("\\\\server\\share", True),
        ("relative/dir", False),
        ("dir\\child", False),
    ],
)
def test_absolute_style_detection(candidate: str, expected: bool) -> None:
    assert is_absolute_style(candidate) is expected


def test_is_valid_directory_rejects_files_and_missing_paths(tmp_path: Path) -> None:
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    assert is_valid_directory(str(tmp_path)) is True
    assert is_valid_directory(str(tmp_path / "file.txt")) is False
    assert is_valid_directory(str(tmp_path / "missing")) is False
    assert is_valid_directory("") is False
