"""Models for the revision diff payload returned by the compare endpoint."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiffKind(IntEnum):
    """How a diff entry's text relates to the older revision (wire values)."""

    LINE_WITH_SAME_CONTENT = 0
    LINE_ADDED = 1
    LINE_REMOVED = 2
    LINE_WITH_DIFF = 3
    PARAGRAPH_MOVED_FROM = 4
    PARAGRAPH_MOVED_TO = 5


class HighlightKind(IntEnum):
    """Whether a highlighted sub-span was inserted or deleted (wire values)."""

    ADDITION = 0
    REMOVAL = 1


def _coerce_enum(enum_cls: type[IntEnum], value: int) -> int:
    # Unknown wire values stay plain ints instead of failing the whole payload
    try:
        return enum_cls(value)
    except ValueError:
        return value


class HighlightRange(BaseModel):
    """A sub-span of a diff entry, addressed in UTF-8 bytes of the entry text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_byte: int = Field(alias="start", ge=0)
    length_bytes: int = Field(alias="length", ge=0)
    kind: int = Field(alias="type")  # HighlightKind, or an unknown wire value

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, value: int) -> int:
        return _coerce_enum(HighlightKind, value)

    @property
    def end_byte(self) -> int:
        return self.start_byte + self.length_bytes

    @property
    def is_addition(self) -> bool:
        return self.kind == HighlightKind.ADDITION


class DiffEntry(BaseModel):
    """One line or paragraph of a revision comparison."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: int = Field(alias="type")  # DiffKind, or an unknown wire value
    text: str = ""
    highlight_ranges: list[HighlightRange] = Field(
        default_factory=list, alias="highlightRanges"
    )
    line_number: int | None = Field(default=None, alias="lineNumber")

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, value: int) -> int:
        return _coerce_enum(DiffKind, value)


class DiffResponse(BaseModel):
    """Parsed body of a compare request between two revisions.

    Only the ``diff`` list is interpreted; revision metadata such as
    ``from``/``to`` and per-entry ``moveInfo``/``offset`` is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    diff: list[DiffEntry] = Field(default_factory=list)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "DiffResponse":
        """Parse a raw JSON document.

        Raises:
            pydantic.ValidationError: If the payload is not valid JSON or
                does not match the expected schema.
        """
        return cls.model_validate_json(payload)
