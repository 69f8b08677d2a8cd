from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested report does not exist."""


class AuthorizationError(DomainError):
    """Raised when a user acts on a report they do not own."""


class SubmissionRejected(DomainError):
    """Raised by the edit path when the session engine refuses the change."""

    def __init__(self, message: str, rejections=()):
        super().__init__(message)
        self.rejections = list(rejections)
