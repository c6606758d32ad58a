"""Shared fixtures for the renderer tests."""

from __future__ import annotations

from typing import Callable

import pytest

from lsp_markup import Position, Range

RangeFactory = Callable[[int, int, int, int], Range]


@pytest.fixture()
def lsp_range() -> RangeFactory:
    def _make(start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
        return Range(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )

    return _make
