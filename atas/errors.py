from __future__ import annotations


class AtasError(Exception):
    """Error whose str() is the message shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IncorrectFormatError(AtasError):
    """Input does not match the grammar of the selected task type."""


class MalformedDateError(AtasError):
    pass


class MalformedDateRangeError(AtasError):
    pass


class BadTimeOrderError(AtasError):
    """Event end is not strictly after its start."""
