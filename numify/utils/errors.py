"""Centralized error response helpers and exception utilities.

The formatting engine itself never fails for a real number; the only domain
errors are caller misuse (non-numeric input) and HTTP-level limits.
"""
from __future__ import annotations
from typing import Any, Dict
import time

ERROR_CODES = {
    "validation": "VALIDATION_ERROR",
    "invalid_number": "INVALID_NUMBER",
    "batch_too_large": "BATCH_TOO_LARGE",
    "not_found": "NOT_FOUND",
    "internal": "INTERNAL_SERVER_ERROR",
}


def error_payload(code: str, message: str, details: Any | None = None, path: str | None = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "status": "error",
        "error": {
            "code": code,
            "message": message,
        },
        "timestamp": time.time(),
    }
    if details is not None:
        payload["error"]["details"] = details
    if path:
        payload["path"] = path
    return payload


class DomainError(Exception):
    """Base domain error storing standardized fields."""

    def __init__(self, code: str, message: str, details: Any | None = None):  # noqa: D401
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidNumber(DomainError, TypeError):
    """Raised when a formatter receives something that is not a real number."""

    def __init__(self, value: Any):
        super().__init__(
            ERROR_CODES["invalid_number"],
            f"Expected a real number, got {type(value).__name__}",
            details={"value": repr(value)},
        )


class BatchTooLarge(DomainError):
    def __init__(self, size: int, limit: int):
        super().__init__(
            ERROR_CODES["batch_too_large"],
            f"Batch of {size} values exceeds limit {limit}",
            details={"size": size, "limit": limit},
        )


__all__ = [
    "ERROR_CODES",
    "error_payload",
    "DomainError",
    "InvalidNumber",
    "BatchTooLarge",
]
