"""Domain exceptions for pair counting.

All errors raised by the counting core derive from PairCountError so the
CLI can catch them in one place and render them consistently.
"""

from __future__ import annotations

from typing import Any


class PairCountError(Exception):
    """Base exception for all pair counting errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "pair_count_error",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize pair count error.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            details: Additional error details (offending values, indices).
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary format."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidDivisor(PairCountError, ValueError):
    """Raised when the divisor is zero or not an integer."""

    def __init__(self, divisor: Any, message: str | None = None) -> None:
        super().__init__(
            message or f"Divisor must be a non-zero integer, got {divisor!r}",
            error_code="invalid_divisor",
            details={"divisor": repr(divisor)},
        )
        self.divisor = divisor


class InvalidSequence(PairCountError, ValueError):
    """Raised when the input sequence is malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, error_code="invalid_sequence", details=details)


class FileAccessError(PairCountError):
    """Raised when a request file cannot be read or a result file cannot be written."""

    def __init__(self, path: str, message: str, error_code: str = "input_unreadable") -> None:
        super().__init__(message, error_code=error_code, details={"path": path})
        self.path = path


__all__ = ["PairCountError", "InvalidDivisor", "InvalidSequence", "FileAccessError"]
