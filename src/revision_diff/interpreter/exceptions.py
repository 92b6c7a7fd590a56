"""Exceptions for diff interpretation."""


class DiffInterpretationError(Exception):
    """Base exception for diff interpretation."""


class OffsetOutOfRangeError(DiffInterpretationError):
    """Raised when a byte offset cannot be translated to a string position."""


class MalformedRangeError(DiffInterpretationError):
    """Raised when a highlight range does not fit the text it refers to."""
