"""Line-indexed text documents with clamping position arithmetic."""

from __future__ import annotations

from bisect import bisect_right
from typing import Union

from .protocol.messages import Position

_EOL = "\r\n"


def _compute_line_offsets(text: str) -> tuple[int, ...]:
    """Return the start offset of every line; ``\\r\\n``, ``\\r`` and ``\\n`` all break lines."""
    offsets = [0]
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char in _EOL:
            if char == "\r" and index + 1 < length and text[index + 1] == "\n":
                index += 1
            offsets.append(index + 1)
        index += 1
    return tuple(offsets)


class TextDocument:
    """Immutable text buffer addressed by LSP positions.

    ``offset_at`` and ``position_at`` never raise for out-of-range input:
    anything before the document clamps to its start, anything after it to
    its end, and a character past the end of a line clamps to the end of
    that line.
    """

    __slots__ = ("_text", "_line_offsets")

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_offsets = _compute_line_offsets(text)

    def __repr__(self) -> str:
        return f"TextDocument(line_count={self.line_count}, length={len(self._text)})"

    @property
    def text(self) -> str:
        return self._text

    def get_text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_offsets)

    def _ensure_before_eol(self, offset: int, line_offset: int) -> int:
        while offset > line_offset and self._text[offset - 1] in _EOL:
            offset -= 1
        return offset

    def offset_at(self, position: Position) -> int:
        """Return the clamped offset of ``position``."""
        line = position.line
        if line >= len(self._line_offsets):
            return len(self._text)
        if line < 0:
            return 0
        line_offset = self._line_offsets[line]
        if position.character <= 0:
            return line_offset
        if line + 1 < len(self._line_offsets):
            next_line_offset = self._line_offsets[line + 1]
        else:
            next_line_offset = len(self._text)
        offset = min(line_offset + position.character, next_line_offset)
        return self._ensure_before_eol(offset, line_offset)

    def position_at(self, offset: int) -> Position:
        """Return the position of the clamped ``offset``."""
        offset = max(min(offset, len(self._text)), 0)
        line = bisect_right(self._line_offsets, offset) - 1
        line_offset = self._line_offsets[line]
        offset = self._ensure_before_eol(offset, line_offset)
        return Position(line=line, character=offset - line_offset)


DocumentLike = Union[str, TextDocument]


def is_empty(document: DocumentLike) -> bool:
    """Return whether the document, or the raw text given for it, has no text."""
    if isinstance(document, str):
        return len(document) == 0
    return len(document.get_text()) == 0


def get_text_document(document: DocumentLike) -> TextDocument:
    """Wrap raw text into a TextDocument; an existing document is returned as is."""
    if isinstance(document, str):
        return TextDocument(document)
    return document


__all__ = ["DocumentLike", "TextDocument", "get_text_document", "is_empty"]
