"""Client-facing request errors.

Raised by the dispatcher and turned into 400 responses by the exception
handlers registered in ``main.py``.
"""

from __future__ import annotations

from app.models.example import FieldError


class MalformedInputError(Exception):
    """The request body could not be parsed into the expected shape."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def to_response(self) -> dict:
        return {
            "title": "Bad request",
            "status": 400,
            "detail": "Request body could not be parsed.",
        }


class RequestValidationFailed(Exception):
    """One or more field constraints were violated."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        return list(dict.fromkeys(error.field for error in self.errors))

    def to_response(self) -> dict:
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return {
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": grouped,
        }
