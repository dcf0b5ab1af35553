"""Tests for plan file output."""

import pytest

from business_planner.errors import FilesystemError
from business_planner.utils.file_utils import (
    extension_for,
    resolve_output_dir,
    validate_filename,
    write_document,
)


@pytest.mark.parametrize("format,extension", [
    ("markdown", ".md"),
    ("html", ".html"),
    ("text", ".txt"),
    (None, ".md"),
])
def test_extension_for(format, extension):
    assert extension_for(format) == extension


def test_validate_filename_strips():
    assert validate_filename("  plan ") == "plan"


@pytest.mark.parametrize("filename", ["", "   ", ".", "..", "a/b", "a\\b"])
def test_validate_filename_rejects(filename):
    with pytest.raises(FilesystemError):
        validate_filename(filename)


def test_resolve_output_dir_uses_config(output_dir):
    assert resolve_output_dir() == output_dir.resolve()


def test_write_document_creates_directory(tmp_path):
    target = tmp_path / "deep" / "er"
    path = write_document("héllo", "plan", ".md", output_dir=target)

    assert path == target.resolve() / "plan.md"
    assert path.read_text(encoding="utf-8") == "héllo"


def test_write_document_wraps_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(FilesystemError) as exc:
        write_document("content", "plan", ".md", output_dir=blocker)

    assert exc.value.path == blocker.resolve() / "plan.md"
