"""Models for the interpreted edit details of a revision."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FragmentSource(str, Enum):
    """Which extraction step produced a change fragment."""

    LINE = "line"  # whole entry text
    HIGHLIGHT = "highlight"  # highlighted sub-range of the entry text


class ChangeFragment(BaseModel):
    """A changed sub-string, positioned inside the logical revision buffer.

    ``buffer_start``/``buffer_end`` form a half-open span over the
    concatenation of every entry's text (empty text counted as a single
    line break), each followed by one separator.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    entry_index: int
    source: FragmentSource
    highlight_kind: int | None = None
    buffer_start: int
    buffer_end: int


class EditDetails(BaseModel):
    """Net size change and the changed text of one revision."""

    model_config = ConfigDict(frozen=False)

    size_delta: int = 0
    fragments: list[ChangeFragment] = Field(default_factory=list)

    @computed_field
    @property
    def change_text(self) -> list[str]:
        return [fragment.text for fragment in self.fragments]

    def render(self, separator: str = "\n") -> str:
        """Join the change text, each fragment followed by ``separator``."""
        return "".join(f"{text}{separator}" for text in self.change_text)
