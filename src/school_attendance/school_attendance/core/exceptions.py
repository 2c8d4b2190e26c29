from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class PreconditionError(ValidationError):
    """Raised when a user action is missing something it needs (e.g. a selected class)."""


class ApiError(DomainError):
    """Raised when a call to the external attendance API fails."""


class ApiTransportError(ApiError):
    """The API could not be reached (connection refused, timeout, ...)."""


class ApiStatusError(ApiError):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code
