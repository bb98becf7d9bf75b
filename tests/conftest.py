"""Shared fixtures: small directory trees on tmp_path."""

import os

import pytest

BLOCK = 4096


def write_file(path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


@pytest.fixture
def sample_dir(tmp_path):
    """One 5000-byte file and one empty subdirectory."""
    root = tmp_path / "root"
    root.mkdir()
    write_file(root / "a.txt", 5000)
    (root / "b").mkdir()
    return root


@pytest.fixture
def nested_dir(tmp_path):
    """A few levels of files of assorted sizes, including a hidden one."""
    root = tmp_path / "nested"
    write_file(root / "top.bin", 1)
    write_file(root / ".hidden", 10000)
    write_file(root / "docs" / "readme.md", 4096)
    write_file(root / "docs" / "notes.txt", 4097)
    write_file(root / "docs" / "empty.txt", 0)
    write_file(root / "src" / "pkg" / "mod.py", 12345)
    write_file(root / "src" / "pkg" / "data" / "blob.dat", 70000)
    (root / "src" / "void").mkdir(parents=True)
    return root


DIR_SEP = os.sep
