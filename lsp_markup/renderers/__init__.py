"""One renderer per annotation kind."""

from .diagnostics import render_diagnostics
from .folding_ranges import render_folding_ranges
from .highlights import render_document_highlights
from .inlay_hints import render_inlay_hints
from .selection_ranges import render_selection_ranges

__all__ = [
    "render_diagnostics",
    "render_document_highlights",
    "render_folding_ranges",
    "render_inlay_hints",
    "render_selection_ranges",
]
