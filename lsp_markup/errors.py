"""Exceptions raised by lsp_markup."""

from __future__ import annotations


class LspMarkupError(Exception):
    """Base class for every error raised by this package."""


class InvertedRangeError(LspMarkupError):
    """An annotation ends before it starts.

    The message is the exact text the renderers return in place of the
    rendered document when strict mode is off.
    """

    def __init__(self, kind_name: str, index: int | None = None) -> None:
        self.kind_name = kind_name
        self.index = index
        super().__init__(
            f"Found at least one {kind_name} with its end position being earlier than its start position."
        )


class OverlappingEditError(LspMarkupError):
    """Two text edits cover the same part of the document."""

    def __init__(self, offset: int, last_modified: int) -> None:
        self.offset = offset
        self.last_modified = last_modified
        super().__init__(f"Overlapping edit at offset {offset} (previous edit ends at {last_modified})")


class SettingsError(LspMarkupError):
    """Render settings could not be loaded."""


__all__ = ["InvertedRangeError", "LspMarkupError", "OverlappingEditError", "SettingsError"]
