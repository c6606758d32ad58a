"""Compose text edits into a document's text."""

from __future__ import annotations

from typing import Sequence

from .document import TextDocument
from .errors import OverlappingEditError
from .logging import get_logger
from .protocol.messages import Position, Range, TextEdit

LOGGER = get_logger(__name__)


def insertion(position: Position, text: str) -> TextEdit:
    """Return a zero-width edit inserting ``text`` at ``position``."""
    return TextEdit(range=Range(start=position, end=position), new_text=text)


def _resolve(document: TextDocument, edit: TextEdit) -> tuple[tuple[int, int, int], int, int]:
    """Return the sort key and the normalized start and end offsets of ``edit``."""
    first, second = edit.range.start, edit.range.end
    if (second.line, second.character) < (first.line, first.character):
        first, second = second, first
    start = document.offset_at(first)
    end = max(document.offset_at(second), start)
    return (start, first.line, first.character), start, end


def apply_edits(document: TextDocument, edits: Sequence[TextEdit]) -> str:
    """Apply ``edits`` to ``document`` and return the resulting text.

    Edits are ordered by their start position with a stable sort, so several
    edits at the same position keep the order they were given in: text of an
    earlier edit always ends up left of a later one. Positions that clamp to
    the same offset still follow their line and character order.
    """
    text = document.get_text()
    resolved = [(*_resolve(document, edit), edit) for edit in edits]
    resolved.sort(key=lambda item: item[0])

    spans: list[str] = []
    last_modified = 0
    for _key, start, end, edit in resolved:
        if start < last_modified:
            raise OverlappingEditError(start, last_modified)
        if start > last_modified:
            spans.append(text[last_modified:start])
        if edit.new_text:
            spans.append(edit.new_text)
        last_modified = end
    spans.append(text[last_modified:])
    LOGGER.debug("Applied %d edit(s) to a %d character document", len(resolved), len(text))
    return "".join(spans)


__all__ = ["apply_edits", "insertion"]
