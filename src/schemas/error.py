"""Pydantic schema for error responses."""
from pydantic import BaseModel


class ErrorPresenter(BaseModel):
    """Body returned with every non-2xx response."""

    summary: str
    error_details: str = ""  # Reserved; always empty


def present_error(exc: Exception) -> ErrorPresenter:
    """Build the error body for an exception, using its message as the summary."""
    return ErrorPresenter(summary=str(exc))
