"""Interpretation of a revision diff into a size delta and changed text.

The interpreter walks the diff entries in order, keeping track of where each
entry starts inside the logical revision buffer (every entry's text followed
by one separator). Whole-line changes are scored by their length plus the
separator; highlighted sub-ranges are translated from UTF-8 byte offsets and
scored by their byte length.
"""

import logging
from collections.abc import Iterable

from revision_diff.interpreter.exceptions import DiffInterpretationError, MalformedRangeError
from revision_diff.interpreter.offsets import OffsetMapper
from revision_diff.models import (
    ChangeFragment,
    DiffEntry,
    DiffKind,
    DiffResponse,
    EditDetails,
    FragmentSource,
    HighlightRange,
)

logger = logging.getLogger(__name__)

LINE_BREAK = "\n"
SEPARATOR_LENGTH = 1

# Sign applied to len(text) + separator for whole-entry changes
_LINE_SIGNS: dict[int, int] = {
    DiffKind.LINE_ADDED: 1,
    DiffKind.LINE_REMOVED: -1,
    DiffKind.PARAGRAPH_MOVED_FROM: -1,
    DiffKind.PARAGRAPH_MOVED_TO: 1,
}


class DiffInterpreter:
    """Computes ``EditDetails`` from an ordered list of diff entries.

    Instances hold no state between calls; ``interpret`` may be called
    concurrently for independent inputs.
    """

    def interpret(self, entries: Iterable[DiffEntry]) -> EditDetails:
        """Interpret diff entries into a size delta and change fragments.

        Malformed highlight ranges are logged and skipped; they never abort
        the computation.

        Args:
            entries: Diff entries in revision order.

        Returns:
            EditDetails with the accumulated size delta and fragments in
            entry order, then range order.
        """
        details = EditDetails()
        prefix_length = 0
        for entry_index, entry in enumerate(entries):
            appended_length = self._process_entry(details, entry_index, entry, prefix_length)
            prefix_length += appended_length + SEPARATOR_LENGTH

        logger.debug(
            "Interpreted diff: size_delta=%d fragments=%d buffer_length=%d",
            details.size_delta,
            len(details.fragments),
            prefix_length,
        )
        return details

    def interpret_response(self, response: DiffResponse) -> EditDetails:
        return self.interpret(response.diff)

    def _process_entry(
        self,
        details: EditDetails,
        entry_index: int,
        entry: DiffEntry,
        prefix_length: int,
    ) -> int:
        """Score and extract one entry; return its length in the buffer."""
        text = entry.text
        sign = _LINE_SIGNS.get(entry.kind)
        if sign is not None:
            details.size_delta += sign * (len(text) + SEPARATOR_LENGTH)
            details.fragments.append(
                ChangeFragment(
                    text=text,
                    entry_index=entry_index,
                    source=FragmentSource.LINE,
                    buffer_start=prefix_length,
                    buffer_end=prefix_length + len(text),
                )
            )

        if entry.highlight_ranges:
            if text:
                self._process_ranges(details, entry_index, entry, prefix_length)
            else:
                logger.warning(
                    "Skipping %d highlight range(s) on empty entry %d",
                    len(entry.highlight_ranges),
                    entry_index,
                )

        # Empty text stands in the buffer as a single line break
        return len(text) if text else len(LINE_BREAK)

    def _process_ranges(
        self,
        details: EditDetails,
        entry_index: int,
        entry: DiffEntry,
        prefix_length: int,
    ) -> None:
        mapper = OffsetMapper(entry.text)
        for highlight in entry.highlight_ranges:
            try:
                start, end = self._translate_range(mapper, highlight)
            except DiffInterpretationError as exc:
                logger.warning("Skipping highlight range on entry %d: %s", entry_index, exc)
                continue

            if highlight.is_addition:
                details.size_delta += highlight.length_bytes
            else:
                details.size_delta -= highlight.length_bytes
            details.fragments.append(
                ChangeFragment(
                    text=entry.text[start:end],
                    entry_index=entry_index,
                    source=FragmentSource.HIGHLIGHT,
                    highlight_kind=highlight.kind,
                    buffer_start=prefix_length + start,
                    buffer_end=prefix_length + end,
                )
            )

    @staticmethod
    def _translate_range(mapper: OffsetMapper, highlight: HighlightRange) -> tuple[int, int]:
        """Translate a byte range to a half-open code point range.

        Raises:
            MalformedRangeError: If the range starts past the end of the text.
            OffsetOutOfRangeError: If an offset is negative.
        """
        if highlight.start_byte > mapper.byte_length:
            raise MalformedRangeError(
                f"start {highlight.start_byte} beyond text of {mapper.byte_length} bytes"
            )
        start = mapper.translate(highlight.start_byte)
        end = mapper.translate(highlight.end_byte)
        return start, end


def interpret_diff(entries: Iterable[DiffEntry]) -> EditDetails:
    """Interpret diff entries with a fresh ``DiffInterpreter``."""
    return DiffInterpreter().interpret(entries)
