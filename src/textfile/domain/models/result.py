"""Tagged read result.

A read either succeeds with a value or fails with a reason. An empty file
is a success with an empty value, never a failure.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from textfile.domain.errors import FileReadError

T = TypeVar("T")


class ReadResult(BaseModel, Generic[T]):
    """Outcome of reading a file.

    Attributes:
        value: The content read, ``None`` on failure.
        error: Human-readable failure reason, ``None`` on success.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[T] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ReadResult[T]":
        if (self.value is None) == (self.error is None):
            raise ValueError("ReadResult needs exactly one of 'value' or 'error'")
        return self

    # -- Constructors --------------------------------------------------------

    @classmethod
    def success(cls, value: T) -> "ReadResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "ReadResult[T]":
        return cls(error=reason)

    # -- Accessors -----------------------------------------------------------

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value.

        Raises:
            FileReadError: The read failed.
        """
        if self.error is not None:
            raise FileReadError(self.error)
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or *default* when the read failed."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
