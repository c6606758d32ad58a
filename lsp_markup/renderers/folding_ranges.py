"""Render folding ranges as ``<Kind collapsed="...">...</Kind>`` tags.

When more than one range is rendered, each tag name gets a ``.<id>`` suffix
so that opening and closing tags can be paired up by eye::

    <FoldingRange.a collapsed="...">export fun<FoldingRange.b collapsed="...">ction</FoldingRange.a> aFunction</FoldingRange.b>

Ids are taken from ``RenderSettings.folding_range_ids`` in sorted order and
wrap around once the alphabet is exhausted.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import RenderSettings
from ..document import DocumentLike, TextDocument, get_text_document, is_empty
from ..edits import apply_edits
from ..logging import get_logger
from ..protocol.messages import FoldingRange, TextEdit, coerce_annotations
from ..utils.folding import end_position, is_folding_range_inverted, sort_folding_ranges, start_position
from .base import ensure_not_inverted, render_or_report, tag_edits
from .tags import folding_range_kind_name

LOGGER = get_logger(__name__)


def _tag_name(folding_range: FoldingRange, index: int, total: int, settings: RenderSettings) -> str:
    kind_name = folding_range_kind_name(folding_range.kind)
    if total <= 1:
        return kind_name
    ids = settings.folding_range_ids
    return f"{kind_name}.{ids[index % len(ids)]}"


def _render(document: TextDocument, folding_ranges: list[FoldingRange], settings: RenderSettings) -> str:
    if not folding_ranges:
        return document.get_text()

    ensure_not_inverted(
        "FoldingRange", folding_ranges, lambda folding_range: is_folding_range_inverted(document, folding_range)
    )

    edits: list[TextEdit] = []
    for index, folding_range in enumerate(sort_folding_ranges(document, folding_ranges)):
        tag_name = _tag_name(folding_range, index, len(folding_ranges), settings)
        collapsed_text = folding_range.collapsed_text or settings.default_collapsed_text
        edits.extend(
            tag_edits(
                start_position(document, folding_range),
                end_position(document, folding_range),
                f'{tag_name} collapsed="{collapsed_text}"',
                tag_name,
            )
        )

    LOGGER.debug("Rendering %d folding range(s)", len(folding_ranges))
    return apply_edits(document, edits)


def render_folding_ranges(
    document: DocumentLike,
    folding_ranges: Iterable[object],
    *,
    settings: Optional[RenderSettings] = None,
    strict: Optional[bool] = None,
) -> str:
    """Render ``folding_ranges`` into ``document`` and return the annotated text.

    Missing start/end characters default to the length of the start/end line.
    Without any folding range the document text is returned unchanged.
    """
    if is_empty(document):
        return ""
    text_document = get_text_document(document)
    models = coerce_annotations(FoldingRange, folding_ranges)
    return render_or_report(lambda active: _render(text_document, models, active), settings, strict)


__all__ = ["render_folding_ranges"]
