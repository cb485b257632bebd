"""Error taxonomy shared by the store, its storage ports and the HTTP layer."""

from __future__ import annotations


class PrintlogError(Exception):
    """Base class for application-specific errors."""

    def __init__(self, code: str, message: str, http_status: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status


class FormatError(PrintlogError):
    """Raised when the stored document cannot be parsed into a collection."""

    def __init__(self, message: str, code: str = "format_error"):
        super().__init__(code, message, http_status=500)


class StorageError(PrintlogError, OSError):
    """Raised when the document cannot be read or written."""

    def __init__(self, message: str, code: str = "storage_error"):
        super().__init__(code, message, http_status=500)


class NotFoundError(PrintlogError):
    """Raised when a record id is absent from the collection."""

    def __init__(self, message: str = "Record not found", code: str = "not_found"):
        super().__init__(code, message, http_status=404)


class ValidationError(PrintlogError):
    """Raised when caller input does not have the expected shape."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(code, message, http_status=400)
