"""
Error types raised by request handlers and services.

Each error carries the HTTP status it maps to. The exception handler registered
in `api.main.create_app` renders them with the standard error body.
"""


class BookmarksAPIError(Exception):
    """Base class for errors that are reported to the caller."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BookmarkValidationError(BookmarksAPIError):
    """Raised when a request body is malformed or fails bookmark validation."""

    status_code = 400


class ApiKeyNotFoundError(BookmarksAPIError):
    """Raised when the `apikey` header does not match any stored key."""

    status_code = 403

    def __init__(self, message: str = "API Key not found") -> None:
        super().__init__(message)


class StoreError(BookmarksAPIError):
    """Raised when a database operation fails."""

    status_code = 500


class DatabaseUnavailableError(BookmarksAPIError):
    """Raised by the health check when the database cannot be queried."""

    status_code = 503
