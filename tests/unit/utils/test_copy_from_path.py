from __future__ import annotations

import os
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from result import is_err, is_ok

from modkit.utils.copy import CopyError, copy_from_path


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "main.tf").write_text("main")
    (src / "nested" / "child.tf").write_text("child")
    return src


def test_copies_tree_into_new_destination(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "deploy" / "module"

    result = copy_from_path(source_tree, destination)

    assert is_ok(result)
    assert result.unwrap() == destination
    assert (destination / "main.tf").read_text() == "main"
    assert (destination / "nested" / "child.tf").read_text() == "child"


def test_overwrites_existing_files_and_keeps_others(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "deploy"
    destination.mkdir()
    (destination / "main.tf").write_text("stale")
    (destination / "extra.txt").write_text("keep")

    result = copy_from_path(source_tree, destination)

    assert is_ok(result)
    assert (destination / "main.tf").read_text() == "main"
    assert (destination / "extra.txt").read_text() == "keep"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_preserves_symlinks(source_tree: Path, tmp_path: Path) -> None:
    (source_tree / "link.tf").symlink_to("main.tf")
    destination = tmp_path / "deploy"

    result = copy_from_path(source_tree, destination)

    assert is_ok(result)
    assert (destination / "link.tf").is_symlink()
    assert os.readlink(destination / "link.tf") == "main.tf"


def test_returns_error_when_copy_fails(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "deploy"

    with patch("modkit.utils.copy.shutil.copytree", side_effect=shutil.Error("disk full")):
        result = copy_from_path(source_tree, destination)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, CopyError)
    assert error.source == str(source_tree)
    assert error.destination == str(destination)
    assert "disk full" in error.message


def test_returns_error_when_source_missing(tmp_path: Path) -> None:
    result = copy_from_path(tmp_path / "missing", tmp_path / "deploy")

    assert is_err(result)
    assert isinstance(result.unwrap_err(), CopyError)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_copying_tree_with_symlink_twice_gives_same_tree(source_tree: Path, tmp_path: Path) -> None:
    (source_tree / "link.tf").symlink_to("main.tf")
    (source_tree / "nested" / "dir-link").symlink_to("..")
    destination = tmp_path / "deploy"

    first = copy_from_path(source_tree, destination)
    second = copy_from_path(source_tree, destination)

    assert is_ok(first)
    assert is_ok(second)
    assert os.readlink(destination / "link.tf") == "main.tf"
    assert os.readlink(destination / "nested" / "dir-link") == ".."
    assert (destination / "main.tf").read_text() == "main"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_replaces_existing_file_with_source_symlink(source_tree: Path, tmp_path: Path) -> None:
    (source_tree / "link.tf").symlink_to("main.tf")
    destination = tmp_path / "deploy"
    destination.mkdir()
    (destination / "link.tf").write_text("regular file")

    result = copy_from_path(source_tree, destination)

    assert is_ok(result)
    assert (destination / "link.tf").is_symlink()
    assert (destination / "link.tf").read_text() == "main"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_does_not_write_through_existing_destination_symlink(source_tree: Path, tmp_path: Path) -> None:
    outside = tmp_path / "outside.tf"
    outside.write_text("untouched")
    destination = tmp_path / "deploy"
    destination.mkdir()
    (destination / "main.tf").symlink_to(outside)

    result = copy_from_path(source_tree, destination)

    assert is_ok(result)
    assert not (destination / "main.tf").is_symlink()
    assert (destination / "main.tf").read_text() == "main"
    assert outside.read_text() == "untouched"
