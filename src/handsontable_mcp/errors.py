from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    URL_NOT_ALLOWED = "URL_NOT_ALLOWED"
    FETCH_FAILED = "FETCH_FAILED"


class DocsError(Exception):
    """Raised by tool handlers for all expected failure conditions.

    Caught by server.py and rendered as an ``Error: <message>`` tool result
    with the error flag set. Business logic raises it and lets it propagate;
    only the fetch pipeline re-wraps, to give every fetch failure one shape.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str = "",
        recoverable: bool = False,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable
        self.status_code = status_code

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
                "status_code": self.status_code,
            }
        }


def invalid_input(message: str, suggestion: str = "") -> DocsError:
    """Shorthand for the validation failures raised throughout the validators."""
    return DocsError(
        code=ErrorCode.INVALID_INPUT,
        message=message,
        suggestion=suggestion,
        recoverable=False,
    )
