"""System clipboard — implements ClipboardPort using subprocess."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import NamedTuple

from textfile.domain.errors import ClipboardError
from textfile.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

_TIMEOUT_S = 5.0


class ClipboardCommands(NamedTuple):
    """CLI command tokens for writing and reading the clipboard."""

    copy: list[str]
    paste: list[str]
    # Terminator the paste tool adds to its output, stripped once.
    paste_suffix: str = ""


_WAYLAND = ClipboardCommands(["wl-copy"], ["wl-paste", "--no-newline"])
_XCLIP = ClipboardCommands(
    ["xclip", "-selection", "clipboard"],
    ["xclip", "-selection", "clipboard", "-o"],
)
_XSEL = ClipboardCommands(
    ["xsel", "--clipboard", "--input"],
    ["xsel", "--clipboard", "--output"],
)
_WINDOWS = ClipboardCommands(
    ["clip"],
    [
        "powershell",
        "-NoProfile",
        "-Command",
        "[Console]::OutputEncoding=[Text.Encoding]::UTF8; Get-Clipboard -Raw",
    ],
    paste_suffix="\r\n",
)


def _tool_exists(name: str) -> bool:
    try:
        subprocess.run(
            [name, "--version"],
            capture_output=True,
            check=False,
            timeout=_TIMEOUT_S,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False
    return True


def _detect_backend() -> ClipboardCommands:
    """Return the clipboard commands appropriate for this OS.

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ClipboardCommands(["pbcopy"], ["pbpaste"])

    if sys.platform.startswith("linux"):
        candidates = [_XCLIP, _XSEL]
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates.insert(0, _WAYLAND)
        for commands in candidates:
            if _tool_exists(commands.copy[0]):
                return commands
        raise ClipboardError("No clipboard tool found. Install wl-clipboard, xclip or xsel.")

    if sys.platform == "win32":
        return _WINDOWS

    raise ClipboardError(f"Unsupported platform: {sys.platform}")


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands.

    Parameters
    ----------
    commands : ClipboardCommands | None
        Fixed commands to use instead of detecting them per call.
    """

    def __init__(self, commands: ClipboardCommands | None = None) -> None:
        self._commands = commands

    def _resolve(self) -> ClipboardCommands:
        return self._commands or _detect_backend()

    def copy(self, text: str) -> None:
        """Copy text to system clipboard via subprocess."""
        cmd = self._resolve().copy
        try:
            subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
                timeout=_TIMEOUT_S,
            )
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"Clipboard copy timed out: {exc}") from exc
        except FileNotFoundError as exc:
            raise ClipboardError(f"Clipboard tool missing: {cmd[0]}") from exc
        logger.debug("Copied %d characters with %s", len(text), cmd[0])

    def paste(self) -> str | None:
        """Read clipboard text via subprocess.

        A failing command or non-UTF-8 output means the clipboard holds no
        text, and ``None`` is returned.
        """
        commands = self._resolve()
        cmd = commands.paste
        try:
            proc = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                timeout=_TIMEOUT_S,
            )
        except subprocess.CalledProcessError as exc:
            logger.info("Clipboard holds no text (%s exited %s)", cmd[0], exc.returncode)
            return None
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"Clipboard paste timed out: {exc}") from exc
        except FileNotFoundError as exc:
            raise ClipboardError(f"Clipboard tool missing: {cmd[0]}") from exc

        try:
            text = proc.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.info("Clipboard content from %s is not UTF-8 text", cmd[0])
            return None
        if commands.paste_suffix and text.endswith(commands.paste_suffix):
            text = text[: -len(commands.paste_suffix)]
        return text
