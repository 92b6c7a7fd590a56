"""Translation of UTF-8 byte offsets into Python string positions.

Highlight ranges arrive as offsets into the UTF-8 encoding of an entry's
text, while slicing a ``str`` works on code points. ``OffsetMapper`` builds
the lookup table once per text so every range of an entry reuses it.
"""

from revision_diff.interpreter.exceptions import OffsetOutOfRangeError


def utf8_length(code_point: int) -> int:
    """Return the number of bytes UTF-8 uses to encode ``code_point``."""
    if code_point <= 0x7F:
        return 1
    if code_point <= 0x7FF:
        return 2
    if code_point <= 0xFFFF:
        return 3
    return 4


class OffsetMapper:
    """Maps byte offsets in the UTF-8 encoding of a text to code point positions.

    Byte ``b`` maps to the position of the code point whose encoding
    contains it. Offsets at or past the end of the encoding map to
    ``len(text)`` so they can close a half-open slice through the end.
    """

    def __init__(self, text: str):
        self._text_length = len(text)
        table: list[int] = []
        for position, char in enumerate(text):
            table.extend([position] * utf8_length(ord(char)))
        self._table = tuple(table)

    @property
    def byte_length(self) -> int:
        return len(self._table)

    def translate(self, byte_offset: int) -> int:
        """Translate a byte offset into a code point position.

        Args:
            byte_offset: Offset into the UTF-8 encoding of the text.

        Returns:
            Position of the code point containing the byte, or ``len(text)``
            when the offset runs to or past the end of the encoding.

        Raises:
            OffsetOutOfRangeError: If ``byte_offset`` is negative.
        """
        if byte_offset < 0:
            raise OffsetOutOfRangeError(f"Negative byte offset: {byte_offset}")
        if byte_offset < len(self._table):
            return self._table[byte_offset]
        return self._text_length
