"""
Clipboard and file-save capabilities used by the copy/download actions.

Both are replaceable: the orchestrator only depends on the ``Clipboard``
and ``Saver`` protocols.
"""

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Protocol

from saasistent.generation.exceptions import ClipboardUnavailableError, SaveUnavailableError
from saasistent.storage.paths import ensure_directory

logger = logging.getLogger(__name__)

MARKDOWN_MEDIA_TYPE = "text/markdown"


class Clipboard(Protocol):
    """Write-text clipboard capability."""

    def write_text(self, text: str) -> None:
        """Raises ClipboardUnavailableError if the text could not be copied."""
        ...


class Saver(Protocol):
    """Save-as-file capability."""

    def save(self, filename: str, content: str, media_type: str = MARKDOWN_MEDIA_TYPE) -> Path:
        """Raises SaveUnavailableError if the file could not be written."""
        ...


# Candidate clipboard tools, tried in order
_CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


class SystemClipboard:
    """Copies text through whichever platform clipboard tool is installed."""

    def __init__(self, commands: list[list[str]] | None = None, timeout: float = 5.0):
        self.commands = commands if commands is not None else _CLIPBOARD_COMMANDS
        self.timeout = timeout

    def available_command(self) -> list[str] | None:
        """First clipboard command found on PATH, if any."""
        for command in self.commands:
            if shutil.which(command[0]):
                return command
        return None

    def write_text(self, text: str) -> None:
        command = self.available_command()
        if command is None:
            raise ClipboardUnavailableError("No clipboard tool found (pbcopy, wl-copy, xclip, xsel, clip)")

        # clip.exe expects UTF-16 on Windows
        encoding = "utf-16" if sys.platform == "win32" and command[0] == "clip" else "utf-8"

        try:
            subprocess.run(
                command,
                input=text.encode(encoding),
                check=True,
                timeout=self.timeout,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardUnavailableError(f"{command[0]} failed: {e}") from e

        logger.debug(f"Copied {len(text)} characters with {command[0]}")


class FileSaver:
    """Saves artifacts as files inside one directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, filename: str, content: str, media_type: str = MARKDOWN_MEDIA_TYPE) -> Path:
        name = Path(filename).name
        if not name or name in (".", ".."):
            raise SaveUnavailableError(f"Invalid filename: {filename!r}")
        if media_type == MARKDOWN_MEDIA_TYPE and not name.endswith((".md", ".markdown")):
            name = f"{name}.md"

        try:
            ensure_directory(self.directory)
            path = self.directory / name
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise SaveUnavailableError(f"Cannot write {self.directory / name}: {e}") from e

        logger.info(f"Saved {media_type} file {path}")
        return path
