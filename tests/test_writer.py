"""Tests for writing generated output."""

import pytest

from level3_rendering.writer import OutputWriter
from utils import PathValidationError


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "out" / "record.rs"
    path = OutputWriter().write("struct A;\n", target)

    assert path == target.resolve()
    assert target.read_text(encoding="utf-8") == "struct A;\n"


def test_refuses_to_overwrite(tmp_path):
    target = tmp_path / "record.rs"
    target.write_text("old", encoding="utf-8")

    with pytest.raises(FileExistsError):
        OutputWriter().write("new", target)
    assert target.read_text(encoding="utf-8") == "old"


def test_overwrite_allowed(tmp_path):
    target = tmp_path / "record.rs"
    target.write_text("old", encoding="utf-8")

    OutputWriter().write("new", target, overwrite=True)
    assert target.read_text(encoding="utf-8") == "new"


def test_directory_target_rejected(tmp_path):
    with pytest.raises(PathValidationError, match="is a directory"):
        OutputWriter().write("x", tmp_path)


def test_system_directory_rejected():
    with pytest.raises(PathValidationError, match="system directory"):
        OutputWriter().write("x", "/etc/csv2struct.rs")
