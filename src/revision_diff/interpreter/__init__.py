"""Revision diff interpretation."""

from revision_diff.interpreter.diff_interpreter import DiffInterpreter, interpret_diff
from revision_diff.interpreter.exceptions import (
    DiffInterpretationError,
    MalformedRangeError,
    OffsetOutOfRangeError,
)
from revision_diff.interpreter.offsets import OffsetMapper, utf8_length

__all__ = [
    "DiffInterpretationError",
    "DiffInterpreter",
    "MalformedRangeError",
    "OffsetMapper",
    "OffsetOutOfRangeError",
    "interpret_diff",
    "utf8_length",
]
