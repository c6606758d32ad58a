"""Render document highlights as ``<Kind>...</Kind>`` tags."""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import RenderSettings
from ..document import DocumentLike, get_text_document, is_empty
from ..edits import apply_edits
from ..logging import get_logger
from ..protocol.messages import DocumentHighlight, TextEdit, coerce_annotations
from ..utils.ranges import is_end_earlier_than_start, sort_by_start_position
from .base import ensure_not_inverted, render_or_report, tag_edits
from .tags import highlight_kind_name

LOGGER = get_logger(__name__)


def _render(document: DocumentLike, highlights: list[DocumentHighlight]) -> str:
    ensure_not_inverted("DocumentHighlight", highlights, is_end_earlier_than_start)

    edits: list[TextEdit] = []
    for highlight in sort_by_start_position(highlights):
        kind_name = highlight_kind_name(highlight.kind)
        edits.extend(tag_edits(highlight.range.start, highlight.range.end, kind_name, kind_name))

    LOGGER.debug("Rendering %d document highlight(s)", len(highlights))
    return apply_edits(get_text_document(document), edits)


def render_document_highlights(
    document: DocumentLike,
    highlights: Iterable[object],
    *,
    settings: Optional[RenderSettings] = None,
    strict: Optional[bool] = None,
) -> str:
    """Render ``highlights`` into ``document`` and return the annotated text."""
    if is_empty(document):
        return ""
    models = coerce_annotations(DocumentHighlight, highlights)
    return render_or_report(lambda _settings: _render(document, models), settings, strict)


__all__ = ["render_document_highlights"]
