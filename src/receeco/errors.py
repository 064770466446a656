"""Receeco SDK error handling."""

from typing import Any, Dict


class ErrorCode:
    """Error codes raised by the SDK itself.

    Codes reported by the remote service inside an error envelope are passed
    through verbatim and are not listed here.
    """

    API_KEY_REQUIRED = "API_KEY_REQUIRED"
    INVALID_INPUT = "INVALID_INPUT"
    REQUEST_FAILED = "REQUEST_FAILED"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Used when an error envelope carries no code at all
    UNKNOWN = "UNKNOWN"


class SDKError(Exception):
    """Single error type raised by every failing SDK operation.

    Callers should branch on ``code``; ``message`` is meant for humans.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"ReceecoSDKError [{self.code}]: {self.message}"

    def __repr__(self) -> str:
        return f"SDKError(code={self.code!r}, message={self.message!r})"
