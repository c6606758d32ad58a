"""Render selection ranges as ``<SelectionRange>...</SelectionRange>`` tags.

Only the range itself is rendered; parent selection ranges are ignored.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import RenderSettings
from ..document import DocumentLike, get_text_document, is_empty
from ..edits import apply_edits
from ..logging import get_logger
from ..protocol.messages import SelectionRange, TextEdit, coerce_annotations
from ..utils.ranges import is_end_earlier_than_start, sort_by_start_position
from .base import ensure_not_inverted, render_or_report, tag_edits
from .tags import SELECTION_RANGE_TAG

LOGGER = get_logger(__name__)


def _render(document: DocumentLike, selection_ranges: list[SelectionRange]) -> str:
    text_document = get_text_document(document)
    if not selection_ranges:
        return text_document.get_text()

    ensure_not_inverted("SelectionRange", selection_ranges, is_end_earlier_than_start)

    edits: list[TextEdit] = []
    for selection_range in sort_by_start_position(selection_ranges):
        edits.extend(
            tag_edits(selection_range.range.start, selection_range.range.end, SELECTION_RANGE_TAG, SELECTION_RANGE_TAG)
        )

    LOGGER.debug("Rendering %d selection range(s)", len(selection_ranges))
    return apply_edits(text_document, edits)


def render_selection_ranges(
    document: DocumentLike,
    selection_ranges: Iterable[object],
    *,
    settings: Optional[RenderSettings] = None,
    strict: Optional[bool] = None,
) -> str:
    """Render ``selection_ranges`` into ``document`` and return the annotated text.

    Without any selection range the document text is returned unchanged.
    """
    if is_empty(document):
        return ""
    models = coerce_annotations(SelectionRange, selection_ranges)
    return render_or_report(lambda _settings: _render(document, models), settings, strict)


__all__ = ["render_selection_ranges"]
