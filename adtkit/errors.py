"""Exceptions raised by the abstract data types in this package."""


class IllegalStateError(Exception):
    """Raised when an operation is not allowed in the structure's current state."""


class OutOfBoundError(IndexError):
    """Raised when a position lies outside the bounds of a structure."""


class NotOrderedError(ValueError):
    """Raised when a sequence is neither ascending, constant nor descending."""

    def __init__(self, message: str = "My exception happened") -> None:
        super().__init__(message)