"""Utilities for the revision diff interpreter."""

from revision_diff.utils.logging_setup import (
    JsonLogFormatter,
    configure_logging,
    resolve_level,
)

__all__ = [
    "JsonLogFormatter",
    "configure_logging",
    "resolve_level",
]
