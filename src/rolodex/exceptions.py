"""Custom exceptions for rolodex."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DispatchError",
    "RecordRenderError",
    "RolodexError",
    "StorageError",
]


class RolodexError(Exception):
    """Base exception for all rolodex errors."""


class ConfigurationError(RolodexError, ValueError):
    """Raised when a formatter configuration or registration is malformed."""


class DispatchError(RolodexError):
    """Raised when no render rule applies to a (field, style, record) combination.

    This signals a gap in an output target's rule set, not bad data.
    """

    def __init__(
        self,
        message: str,
        *,
        target: str | None = None,
        subject: object = None,
        style: object = None,
    ) -> None:
        super().__init__(message)
        self.target = target
        self.subject = subject
        self.style = style


class RecordRenderError(RolodexError):
    """Raised when a single record fails to render."""

    def __init__(self, message: str, record_uuid: str | None = None) -> None:
        super().__init__(message)
        self.record_uuid = record_uuid


class StorageError(RolodexError):
    """Raised when a contact store cannot load its records."""
