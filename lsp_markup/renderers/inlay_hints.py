"""Render inlay hints as self-closing tags.

``<_Parameter label="value" _/>``: the leading and trailing underscores stand
for ``padding_left`` and ``padding_right``. Label parts are joined with a
single space. Tooltips and label-part commands are not rendered.
"""

from __future__ import annotations

from typing import Iterable

from ..document import DocumentLike, get_text_document, is_empty
from ..edits import apply_edits, insertion
from ..logging import get_logger
from ..protocol.messages import InlayHint, TextEdit, coerce_annotations
from ..utils.ranges import sort_by_position
from .tags import inlay_hint_kind_name

LOGGER = get_logger(__name__)


def _label_text(inlay_hint: InlayHint) -> str:
    if isinstance(inlay_hint.label, str):
        return inlay_hint.label
    return " ".join(part.value for part in inlay_hint.label)


def _render_hint(inlay_hint: InlayHint) -> str:
    rendered = "<"
    if inlay_hint.padding_left:
        rendered += "_"
    rendered += inlay_hint_kind_name(inlay_hint.kind)
    rendered += f' label="{_label_text(inlay_hint)}"'
    if inlay_hint.padding_right:
        rendered += " _"
    return rendered + "/>"


def render_inlay_hints(
    document: DocumentLike,
    inlay_hints: Iterable[object],
) -> str:
    """Render ``inlay_hints`` into ``document`` and return the annotated text.

    Inlay hints sit at a single position, so there is nothing to validate.
    """
    if is_empty(document):
        return ""

    edits: list[TextEdit] = []
    hints = coerce_annotations(InlayHint, inlay_hints)
    for inlay_hint in sort_by_position(hints):
        edits.append(insertion(inlay_hint.position, _render_hint(inlay_hint)))

    LOGGER.debug("Rendering %d inlay hint(s)", len(hints))
    return apply_edits(get_text_document(document), edits)


__all__ = ["render_inlay_hints"]
