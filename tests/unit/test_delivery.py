"""
Unit tests for the clipboard and file-save capabilities.
"""

import subprocess
from unittest.mock import patch

import pytest

from saasistent.generation import (
    ClipboardUnavailableError,
    FileSaver,
    SaveUnavailableError,
    SystemClipboard,
)


class TestSystemClipboard:
    """Tests for SystemClipboard."""

    def test_no_tool_available(self):
        """Test the error when no clipboard tool is installed."""
        clipboard = SystemClipboard(commands=[["no-such-clipboard-tool"]])
        assert clipboard.available_command() is None
        with pytest.raises(ClipboardUnavailableError):
            clipboard.write_text("hello")

    def test_first_available_tool_used(self):
        """Test that text is piped to the first tool on PATH."""
        clipboard = SystemClipboard(commands=[["missing"], ["xclip", "-selection", "clipboard"]])

        with patch(
            "saasistent.generation.delivery.shutil.which",
            side_effect=lambda name: "/usr/bin/xclip" if name == "xclip" else None,
        ), patch("saasistent.generation.delivery.subprocess.run") as mock_run:
            clipboard.write_text("hello")

        args, kwargs = mock_run.call_args
        assert args[0] == ["xclip", "-selection", "clipboard"]
        assert kwargs["input"] == b"hello"
        assert kwargs["check"] is True

    def test_tool_failure(self):
        """Test that a failing tool raises ClipboardUnavailableError."""
        clipboard = SystemClipboard(commands=[["pbcopy"]])

        with patch("saasistent.generation.delivery.shutil.which", return_value="/usr/bin/pbcopy"), patch(
            "saasistent.generation.delivery.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "pbcopy"),
        ):
            with pytest.raises(ClipboardUnavailableError):
                clipboard.write_text("hello")


class TestFileSaver:
    """Tests for FileSaver."""

    def test_save_creates_directory(self, temp_dir):
        """Test writing a markdown file into a new directory."""
        saver = FileSaver(temp_dir / "out")
        path = saver.save("acme-mvp-scope.md", "# MVP")

        assert path == temp_dir / "out" / "acme-mvp-scope.md"
        assert path.read_text(encoding="utf-8") == "# MVP"

    def test_markdown_extension_added(self, temp_dir):
        """Test that markdown files get a .md extension."""
        path = FileSaver(temp_dir).save("notes", "x")
        assert path.name == "notes.md"

    def test_other_media_types_keep_name(self, temp_dir):
        """Test that non-markdown saves keep their name."""
        path = FileSaver(temp_dir).save("notes.txt", "x", media_type="text/plain")
        assert path.name == "notes.txt"

    def test_directory_components_stripped(self, temp_dir):
        """Test that file names cannot escape the directory."""
        path = FileSaver(temp_dir / "out").save("../../escape.md", "x")
        assert path.parent == temp_dir / "out"

    def test_invalid_name(self, temp_dir):
        """Test that an empty file name is rejected."""
        with pytest.raises(SaveUnavailableError):
            FileSaver(temp_dir).save("", "x")

    def test_unwritable_directory(self, temp_dir):
        """Test that write failures raise SaveUnavailableError."""
        blocker = temp_dir / "file"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(SaveUnavailableError):
            FileSaver(blocker / "sub").save("a.md", "x")
