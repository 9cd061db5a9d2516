from __future__ import annotations

from typing import Any


class AccessGridError(Exception):
    """Top-level SDK error with optional HTTP metadata."""

    def __init__(self, message: str, status_code: int | None = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class AuthenticationError(AccessGridError):
    """Credentials were rejected by the API."""


class ResourceNotFoundError(AccessGridError):
    """The addressed card, template or pass does not exist."""


class ValidationError(AccessGridError):
    """The API rejected the request parameters."""


class UnsupportedMethodError(AccessGridError):
    """Raised before any I/O when a request uses an HTTP method the API does not accept."""
