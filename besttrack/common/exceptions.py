"""Custom exceptions for the best-track service.

The parser itself never raises for malformed data rows; these exceptions
cover caller contract violations and limits enforced by the HTTP layer.
The FastAPI exception handler in main.py catches BestTrackError and
returns structured JSON error responses.
"""

from __future__ import annotations


class BestTrackError(Exception):
    """Base exception for all best-track errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of structured data for logging/debugging.
    """

    status_code: int = 400

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{super().__str__()} | context={self.context}"
        return super().__str__()


class ParseError(BestTrackError):
    """Input handed to the parser is not text at all."""


class InputTooLargeError(BestTrackError):
    """Submitted best-track payload exceeds the configured size limit."""

    status_code = 413

    def __init__(self, size_bytes: int, limit_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        super().__init__(
            f"Best-track payload is {size_bytes} bytes (limit: {limit_bytes} bytes)",
            context={"size_bytes": size_bytes, "limit_bytes": limit_bytes},
        )
