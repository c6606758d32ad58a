"""Render diagnostics as XML-like tags inside the document text.

A diagnostic becomes ``<Severity[:Tag...] msg="..." [code=..] [src=".."]
[codeDesc=".."]>`` before its range and ``</Severity>`` after it, e.g.::

    export function <Error:Unnecessary msg="unused" code=6133>functionName</Error>() {

Attribute values are written verbatim, without escaping.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import RenderSettings
from ..document import DocumentLike, get_text_document, is_empty
from ..edits import apply_edits
from ..logging import get_logger
from ..protocol.messages import Diagnostic, TextEdit, coerce_annotations
from ..utils.ranges import is_end_earlier_than_start, sort_by_start_position
from .base import ensure_not_inverted, render_or_report, tag_edits
from .tags import diagnostic_tag_name, severity_name

LOGGER = get_logger(__name__)


def _opening_tag(diagnostic: Diagnostic, severity: str) -> str:
    parts = [severity]
    if diagnostic.tags:
        parts.extend(diagnostic_tag_name(tag) for tag in diagnostic.tags)
    rendered = ":".join(parts)

    rendered += f' msg="{diagnostic.message}"'
    if diagnostic.code is not None:
        # Numeric codes are written bare, string codes quoted.
        if isinstance(diagnostic.code, str):
            rendered += f' code="{diagnostic.code}"'
        else:
            rendered += f" code={diagnostic.code}"
    if diagnostic.source:
        rendered += f' src="{diagnostic.source}"'
    if diagnostic.code_description:
        rendered += f' codeDesc="{diagnostic.code_description.href}"'
    return rendered


def _render(document: DocumentLike, diagnostics: list[Diagnostic]) -> str:
    ensure_not_inverted("Diagnostic", diagnostics, is_end_earlier_than_start)

    edits: list[TextEdit] = []
    for diagnostic in sort_by_start_position(diagnostics):
        severity = severity_name(diagnostic.severity)
        edits.extend(
            tag_edits(diagnostic.range.start, diagnostic.range.end, _opening_tag(diagnostic, severity), severity)
        )

    LOGGER.debug("Rendering %d diagnostic(s)", len(diagnostics))
    return apply_edits(get_text_document(document), edits)


def render_diagnostics(
    document: DocumentLike,
    diagnostics: Iterable[object],
    *,
    settings: Optional[RenderSettings] = None,
    strict: Optional[bool] = None,
) -> str:
    """Render ``diagnostics`` into ``document`` and return the annotated text.

    Args:
        document: The text of the document, or the document itself.
        diagnostics: ``Diagnostic`` models, LSP JSON mappings or objects of the
            same shape.
        settings: Render settings; only ``raise_on_inverted`` applies here.
        strict: Raise ``InvertedRangeError`` instead of returning its message
            when a diagnostic ends before it starts. Overrides ``settings``.

    Returns:
        The annotated text, or the inverted-range message.
    """
    if is_empty(document):
        return ""
    models = coerce_annotations(Diagnostic, diagnostics)
    return render_or_report(lambda _settings: _render(document, models), settings, strict)


__all__ = ["render_diagnostics"]
