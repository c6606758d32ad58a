"""Typed LSP messages consumed by the renderers.

The shapes follow the Language Server Protocol 3.17. Python attributes are
snake_case; the camelCase wire names are accepted as aliases so raw LSP JSON
validates directly.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Iterable, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DiagnosticSeverity(enum.IntEnum):
    Error = 1
    Warning = 2
    Information = 3
    Hint = 4


class DiagnosticTag(enum.IntEnum):
    Unnecessary = 1
    Deprecated = 2


class DocumentHighlightKind(enum.IntEnum):
    Text = 1
    Read = 2
    Write = 3


class InlayHintKind(enum.IntEnum):
    Type = 1
    Parameter = 2


class FoldingRangeKind(str, enum.Enum):
    Comment = "comment"
    Imports = "imports"
    Region = "region"


class LspModel(BaseModel):
    """Base model accepting both snake_case and camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Position(LspModel):
    """Zero-based line and character offset.

    Coordinates are not bounded here; documents clamp them on conversion.
    """

    line: int
    character: int


class Range(LspModel):
    start: Position
    end: Position


class CodeDescription(LspModel):
    href: str


class Diagnostic(LspModel):
    """A diagnostic; severities and tags outside the known enums are kept as plain ints."""

    range: Range
    message: str
    severity: Optional[Union[DiagnosticSeverity, int]] = None
    code: Optional[Union[int, str]] = None
    code_description: Optional[CodeDescription] = None
    source: Optional[str] = None
    tags: Optional[list[Union[DiagnosticTag, int]]] = None


class DocumentHighlight(LspModel):
    range: Range
    kind: Optional[Union[DocumentHighlightKind, int]] = None


class FoldingRange(LspModel):
    """A foldable region; missing characters default to the line length."""

    start_line: int
    end_line: int
    start_character: Optional[int] = None
    end_character: Optional[int] = None
    kind: Optional[Union[FoldingRangeKind, str]] = None
    collapsed_text: Optional[str] = None


class MarkupContent(LspModel):
    kind: str
    value: str


class InlayHintLabelPart(LspModel):
    value: str
    tooltip: Optional[Union[str, MarkupContent]] = None


class InlayHint(LspModel):
    position: Position
    label: Union[str, list[InlayHintLabelPart]]
    kind: Optional[Union[InlayHintKind, int]] = None
    tooltip: Optional[Union[str, MarkupContent]] = None
    padding_left: Optional[bool] = None
    padding_right: Optional[bool] = None


class SelectionRange(LspModel):
    range: Range
    parent: Optional[SelectionRange] = None


class TextEdit(LspModel):
    range: Range
    new_text: str


ModelT = TypeVar("ModelT", bound=LspModel)


def coerce_annotations(model: type[ModelT], items: Iterable[object]) -> list[ModelT]:
    """Return ``items`` as ``model`` instances.

    Instances pass through untouched, mappings are validated as LSP JSON and
    any other object is read through its attributes.
    """
    coerced: list[ModelT] = []
    for item in items:
        if isinstance(item, model):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(model.model_validate(item))
        else:
            coerced.append(model.model_validate(item, from_attributes=True))
    return coerced


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
    "LspModel",
    "MarkupContent",
    "Position",
    "Range",
    "SelectionRange",
    "TextEdit",
    "coerce_annotations",
]
