"""Common save error types."""

from __future__ import annotations


class CommonSaveError(Exception):
    """Base for common save errors."""


class CodecError(CommonSaveError, ValueError):
    """Stored data could not be decoded."""


class StorageError(CommonSaveError, OSError):
    def __init__(self, location: str, detail: str):
        super().__init__(f"Storage failure at '{location}': {detail}")
        self.location = location
        self.detail = detail
