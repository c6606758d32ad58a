"""Ordering and validation of range-based annotations."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Protocol, TypeVar

from ..protocol.messages import InlayHint, Position, Range


class HasRange(Protocol):
    range: Range


RangedT = TypeVar("RangedT", bound=HasRange)


def compare_positions(first: Position, second: Position) -> int:
    """Return -1, 0 or 1 ordering two positions line first, then character."""
    if first.line != second.line:
        return -1 if first.line < second.line else 1
    if first.character != second.character:
        return -1 if first.character < second.character else 1
    return 0


def sort_by_start_position(annotations: Iterable[RangedT]) -> list[RangedT]:
    """Stable sort ascending by range start; ties keep their input order."""
    return sorted(annotations, key=cmp_to_key(lambda a, b: compare_positions(a.range.start, b.range.start)))


def sort_by_position(inlay_hints: Iterable[InlayHint]) -> list[InlayHint]:
    """Stable sort of inlay hints ascending by their position."""
    return sorted(inlay_hints, key=cmp_to_key(lambda a, b: compare_positions(a.position, b.position)))


def is_end_earlier_than_start(annotation: HasRange) -> bool:
    return compare_positions(annotation.range.end, annotation.range.start) < 0


__all__ = [
    "HasRange",
    "compare_positions",
    "is_end_earlier_than_start",
    "sort_by_position",
    "sort_by_start_position",
]
