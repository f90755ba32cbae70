from pathlib import Path

import pytest

from project_zipper.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    format_bytes,
    is_hidden_path,
    relative_posix,
)


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5 MB"),
        (3 * 1024**3, "3 GB"),
    ],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (".env", True),
        ("src/.cache/data", True),
        ("src/app.py", False),
        ("./src/app.py", False),
        ("docs/v1.0/notes.md", False),
    ],
)
def test_is_hidden_path(path: str, expected: bool) -> None:
    assert is_hidden_path(path) is expected


def test_relative_posix(tmp_path: Path) -> None:
    assert relative_posix(tmp_path / "a" / "b.txt", tmp_path) == "a/b.txt"


def test_compact_home_path_for_absolute_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path / "project" / "dist") == "~/project/dist"


def test_compact_home_paths_in_text_rewrites_embedded_paths(tmp_path: Path) -> None:
    message = f"Cannot list directory: {tmp_path / 'project' / 'locked'}"

    assert compact_home_paths_in_text(message) == "Cannot list directory: ~/project/locked"
