"""Render LSP annotations into source text as inline XML-like tags."""

from .config import RenderSettings, load_settings
from .document import TextDocument, get_text_document, is_empty
from .edits import apply_edits, insertion
from .errors import InvertedRangeError, LspMarkupError, OverlappingEditError, SettingsError
from .logging import configure_logging, get_logger
from .protocol.messages import (
    CodeDescription,
    Diagnostic,
    DiagnosticSeverity,
    DiagnosticTag,
    DocumentHighlight,
    DocumentHighlightKind,
    FoldingRange,
    FoldingRangeKind,
    InlayHint,
    InlayHintKind,
    InlayHintLabelPart,
    Position,
    Range,
    SelectionRange,
    TextEdit,
)
from .renderers import (
    render_diagnostics,
    render_document_highlights,
    render_folding_ranges,
    render_inlay_hints,
    render_selection_ranges,
)

__version__ = "0.1.0"

__all__ = [
    "CodeDescription",
    "Diagnostic",
    "DiagnosticSeverity",
    "DiagnosticTag",
    "DocumentHighlight",
    "DocumentHighlightKind",
    "FoldingRange",
    "FoldingRangeKind",
    "InlayHint",
    "InlayHintKind",
    "InlayHintLabelPart",
    "InvertedRangeError",
    "LspMarkupError",
    "OverlappingEditError",
    "Position",
    "Range",
    "RenderSettings",
    "SelectionRange",
    "SettingsError",
    "TextDocument",
    "TextEdit",
    "apply_edits",
    "configure_logging",
    "get_logger",
    "get_text_document",
    "insertion",
    "is_empty",
    "load_settings",
    "render_diagnostics",
    "render_document_highlights",
    "render_folding_ranges",
    "render_inlay_hints",
    "render_selection_ranges",
]
