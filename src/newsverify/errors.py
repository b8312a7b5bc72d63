"""
Error taxonomy for the verification engine.

Every error that reaches the HTTP boundary collapses to the same generic
message; the detail carried here is for server-side logs only.
"""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Failed to verify content"


class VerificationError(Exception):
    """Base class for verification failures."""


class StoreUnavailable(VerificationError):
    """Raised when the backing store cannot serve a lookup or log append."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"store {operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class MalformedSubmission(VerificationError):
    """Raised when a submission is missing or has an invalid contentType/content."""


class InternalError(VerificationError):
    """Raised on an unexpected fault in fingerprinting or classification."""
