"""Domain errors — custom exceptions for textfile.

``TextFile`` converts I/O and clipboard failures into sentinel return
values; these exceptions are raised by adapters and by callers that prefer
exceptions over sentinels.
"""


class TextFileError(Exception):
    """Base exception for all textfile errors."""


class FileReadError(TextFileError):
    """Raised when a failed read result is unwrapped."""


class FileWriteError(TextFileError):
    """Raised when a caller escalates a failed write."""


class ClipboardError(TextFileError):
    """Raised when clipboard operations fail."""


class ConfigurationError(TextFileError):
    """Raised when settings values are invalid."""
