"""Data models for the revision diff interpreter."""

from revision_diff.models.diff_models import (
    DiffEntry,
    DiffKind,
    DiffResponse,
    HighlightKind,
    HighlightRange,
)
from revision_diff.models.edit_models import ChangeFragment, EditDetails, FragmentSource

__all__ = [
    "ChangeFragment",
    "DiffEntry",
    "DiffKind",
    "DiffResponse",
    "EditDetails",
    "FragmentSource",
    "HighlightKind",
    "HighlightRange",
]
