"""Tag names for each annotation kind."""

from __future__ import annotations

from typing import Optional, Union

from ..protocol.messages import (
    DiagnosticSeverity,
    DiagnosticTag,
    DocumentHighlightKind,
    FoldingRangeKind,
    InlayHintKind,
)

SELECTION_RANGE_TAG = "SelectionRange"

_SEVERITY_NAMES = {severity: severity.name for severity in DiagnosticSeverity}
_HIGHLIGHT_KIND_NAMES = {kind: kind.name for kind in DocumentHighlightKind}
_INLAY_HINT_KIND_NAMES = {kind: kind.name for kind in InlayHintKind}
# Folding range kinds are open-ended strings, so they are keyed by value.
_FOLDING_RANGE_KIND_NAMES = {kind.value: kind.name for kind in FoldingRangeKind}


def severity_name(severity: Optional[int]) -> str:
    """Unspecified severities are left to the client, rendered as ``Diagnostic``."""
    return _SEVERITY_NAMES.get(severity, "Diagnostic")


def diagnostic_tag_name(tag: int) -> str:
    return "Unnecessary" if tag == DiagnosticTag.Unnecessary else "Deprecated"


def highlight_kind_name(kind: Optional[int]) -> str:
    return _HIGHLIGHT_KIND_NAMES.get(kind, "Highlight")


def folding_range_kind_name(kind: Optional[Union[FoldingRangeKind, str]]) -> str:
    if isinstance(kind, FoldingRangeKind):
        kind = kind.value
    return _FOLDING_RANGE_KIND_NAMES.get(kind, "FoldingRange")


def inlay_hint_kind_name(kind: Optional[int]) -> str:
    return _INLAY_HINT_KIND_NAMES.get(kind, "InlayHint")


__all__ = [
    "SELECTION_RANGE_TAG",
    "diagnostic_tag_name",
    "folding_range_kind_name",
    "highlight_kind_name",
    "inlay_hint_kind_name",
    "severity_name",
]
