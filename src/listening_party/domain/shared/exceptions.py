"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InvalidIdentifierError(ValidationError):
    """Raised when an album identifier is malformed and cannot be fetched."""

    def __init__(self, identifier: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid album identifier: {identifier!r}", field="album_id")
        self.code = "INVALID_IDENTIFIER"
        self.identifier = identifier


class FetchFailedError(DomainError):
    """Raised when the music catalog could not deliver a complete album."""

    def __init__(self, album_id: str, cause: BaseException, message: str | None = None) -> None:
        msg = message or f"Failed to fetch album '{album_id}': {cause}"
        super().__init__(msg, code="FETCH_FAILED")
        self.album_id = album_id
        self.cause = cause
