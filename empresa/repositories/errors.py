"""Exceptions raised by the persistence adapters."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for record store failures."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class DecodeError(StoreError):
    """Persisted data is not a JSON array of employee objects."""


class WriteError(StoreError):
    """Encoding or writing the store file failed."""


class DuplicateIdError(StoreError):
    """An explicit id collides with a record already in the store."""
