"""Character-accurate text views for span reporting.

Recipe text routinely contains vulgar-fraction glyphs (``½``, ``⅓``...) that
take several bytes once encoded. Parsers in this package always report
positions as *character* offsets into the original document; the helpers
below bridge the byte offsets produced by encoded scanners and the character
offsets expected by callers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

__all__ = ["Cursor", "char_index_for_byte", "char_slice"]


def char_slice(text: str, start: int, end: int) -> Optional[str]:
    """Return the characters ``start:end`` of ``text``.

    An empty range yields ``""`` whatever its position; a range reaching past
    the available characters yields ``None``.
    """

    if end <= start:
        return ""
    if start < 0 or end > len(text):
        return None
    return text[start:end]


def char_index_for_byte(text: str, byte_offset: int) -> int:
    """Map a UTF-8 ``byte_offset`` within ``text`` to a character index.

    A character only partially covered by the offset counts as consumed, so
    offsets inside a multi-byte glyph resolve to the index after it; offsets
    past the end resolve to the character count.
    """

    remaining = byte_offset
    for index, char in enumerate(text):
        if remaining <= 0:
            return index
        remaining -= len(char.encode("utf-8"))
    return len(text)


@dataclass(frozen=True)
class Cursor:
    """Immutable view of ``text`` starting at ``char_index`` in a document."""

    text: str
    char_index: int = 0

    @classmethod
    def of(cls, value: Union["Cursor", str]) -> "Cursor":
        if isinstance(value, Cursor):
            return value
        return cls(value, 0)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        start, end = self.range()
        return f"Cursor({start}->{end}: {self.text!r})"

    @property
    def end_index(self) -> int:
        return self.char_index + len(self.text)

    def range(self) -> Tuple[int, int]:
        """Document-relative character range covered by this view."""

        return (self.char_index, self.end_index)

    def char_index_at(self, byte_offset: int) -> int:
        """Document-relative character index of ``byte_offset`` in this view."""

        return self.char_index + char_index_for_byte(self.text, byte_offset)

    def advance(self, count: int) -> "Cursor":
        """Drop the first ``count`` characters, keeping document offsets."""

        count = max(0, min(count, len(self.text)))
        return Cursor(self.text[count:], self.char_index + count)

    def advance_bytes(self, byte_offset: int) -> "Cursor":
        """Drop the characters covered by the first ``byte_offset`` UTF-8 bytes."""

        return self.advance(char_index_for_byte(self.text, byte_offset))

    def take(self, count: int) -> "Cursor":
        """Keep only the first ``count`` characters."""

        return Cursor(self.text[: max(0, count)], self.char_index)

    def slice(self, start: int, end: int) -> Optional["Cursor"]:
        """Sub-view by relative character range, ``None`` when out of bounds."""

        sliced = char_slice(self.text, start, end)
        if sliced is None:
            return None
        return Cursor(sliced, self.char_index + max(0, start))

    def until(self, rest: "Cursor") -> "Cursor":
        """Portion of this view consumed before ``rest`` begins."""

        return self.take(rest.char_index - self.char_index)
