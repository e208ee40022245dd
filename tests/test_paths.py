from __future__ import annotations

import os

import pytest

from dirpost.errors import ConfigurationError
from dirpost.paths import denormalize, destination, normalize, strip_root, validate_directory


def test_normalize_removes_local_separator():
    rel = os.path.join("a", "b", "c.txt")
    wire = normalize(rel)
    assert os.sep not in wire
    assert wire == "a\0b\0c.txt"
    assert denormalize(wire) == rel


def test_separator_portability():
    wire = normalize("sub\\deeper\\b.bin", sep="\\")
    assert wire == "sub\0deeper\0b.bin"
    assert denormalize(wire, sep="/") == "sub/deeper/b.bin"


def test_validate_directory_canonicalizes(tmp_path):
    (tmp_path / "d").mkdir()
    messy = os.path.join(str(tmp_path), "d", "..", "d")
    assert validate_directory(messy) == os.path.realpath(tmp_path / "d")


def test_validate_directory_rejects_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        validate_directory(str(tmp_path / "nope"))


def test_validate_directory_rejects_file(tmp_path):
    f = tmp_path / "f.txt"
    f.write_text("x")
    with pytest.raises(ConfigurationError):
        validate_directory(str(f))


def test_strip_root_keeps_leading_separator():
    root = os.path.join(os.sep, "srv", "data")
    assert strip_root(root, os.path.join(root, "a.txt")) == os.sep + "a.txt"


def test_destination_accepts_both_name_forms(tmp_path):
    root = str(tmp_path)
    expected = os.path.join(root, "sub", "b.bin")
    assert destination(root, os.sep + os.path.join("sub", "b.bin")) == expected
    assert destination(root, os.path.join("sub", "b.bin")) == expected
