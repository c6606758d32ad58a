"""Folding range helpers.

A folding range whose ``start_character`` or ``end_character`` is missing
covers up to the end of that line, so comparing two of them needs the
document to measure line lengths.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Optional

from ..document import TextDocument
from ..protocol.messages import FoldingRange, Position


def calculate_character(document: TextDocument, line: int) -> int:
    """Return the length of ``line`` in ``document``."""
    if line == document.line_count - 1:
        # The last line has no following line to measure against.
        last_line_start = document.offset_at(Position(line=line, character=0))
        return len(document.get_text()) - last_line_start
    next_line_start = document.offset_at(Position(line=line + 1, character=0))
    return document.position_at(next_line_start - 1).character


def resolve_character(document: TextDocument, line: int, character: Optional[int]) -> int:
    return character if character is not None else calculate_character(document, line)


def start_position(document: TextDocument, folding_range: FoldingRange) -> Position:
    character = resolve_character(document, folding_range.start_line, folding_range.start_character)
    return Position(line=folding_range.start_line, character=character)


def end_position(document: TextDocument, folding_range: FoldingRange) -> Position:
    character = resolve_character(document, folding_range.end_line, folding_range.end_character)
    return Position(line=folding_range.end_line, character=character)


def _compare_starts(document: TextDocument, first: FoldingRange, second: FoldingRange) -> int:
    if first.start_line != second.start_line:
        return -1 if first.start_line < second.start_line else 1
    first_char = resolve_character(document, first.start_line, first.start_character)
    second_char = resolve_character(document, second.start_line, second.start_character)
    return (first_char > second_char) - (first_char < second_char)


def sort_folding_ranges(document: TextDocument, folding_ranges: Iterable[FoldingRange]) -> list[FoldingRange]:
    """Stable sort ascending by start, resolving missing start characters."""
    return sorted(folding_ranges, key=cmp_to_key(lambda a, b: _compare_starts(document, a, b)))


def is_folding_range_inverted(document: TextDocument, folding_range: FoldingRange) -> bool:
    if folding_range.start_line > folding_range.end_line:
        return True
    if folding_range.start_line == folding_range.end_line:
        start_char = resolve_character(document, folding_range.start_line, folding_range.start_character)
        end_char = resolve_character(document, folding_range.end_line, folding_range.end_character)
        return start_char > end_char
    return False


__all__ = [
    "calculate_character",
    "end_position",
    "is_folding_range_inverted",
    "resolve_character",
    "sort_folding_ranges",
    "start_position",
]
