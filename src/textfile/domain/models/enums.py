"""Enumerations for textfile settings."""

from enum import Enum


class ClipboardBackend(str, Enum):
    """Clipboard implementation wired by the container."""

    SYSTEM = "system"  # OS clipboard via subprocess tools
    FILE = "file"  # text file in the user cache dir, for headless hosts


class AppendMode(str, Enum):
    """How ``TextFile.append`` adds text to the end of a file."""

    REWRITE = "rewrite"  # read, concatenate, rewrite whole file (not atomic)
    NATIVE = "native"  # single write in platform append mode


class LogLevel(str, Enum):
    """Logging levels accepted in settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
