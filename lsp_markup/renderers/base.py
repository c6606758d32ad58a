"""Building blocks shared by the annotation renderers."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from ..config import DEFAULT_SETTINGS, RenderSettings
from ..edits import insertion
from ..errors import InvertedRangeError
from ..logging import get_logger
from ..protocol.messages import Position, TextEdit

LOGGER = get_logger(__name__)

AnnotationT = TypeVar("AnnotationT")


def tag_edits(start: Position, end: Position, opening: str, tag_name: str) -> tuple[TextEdit, TextEdit]:
    """Return the opening and closing tag edits bracketing ``start``..``end``.

    ``opening`` is the tag name followed by its attributes, without brackets.
    """
    return insertion(start, f"<{opening}>"), insertion(end, f"</{tag_name}>")


def ensure_not_inverted(
    kind_name: str,
    annotations: Iterable[AnnotationT],
    is_inverted: Callable[[AnnotationT], bool],
) -> None:
    """Raise InvertedRangeError for the first annotation ending before it starts."""
    for index, annotation in enumerate(annotations):
        if is_inverted(annotation):
            LOGGER.warning("%s at index %d ends before it starts; nothing rendered", kind_name, index)
            raise InvertedRangeError(kind_name, index)


def render_or_report(
    render: Callable[[RenderSettings], str],
    settings: Optional[RenderSettings],
    strict: Optional[bool],
) -> str:
    """Run ``render``; an inverted annotation yields its message unless strict."""
    active = settings or DEFAULT_SETTINGS
    try:
        return render(active)
    except InvertedRangeError as error:
        raise_error = active.raise_on_inverted if strict is None else strict
        if raise_error:
            raise
        return str(error)


__all__ = ["ensure_not_inverted", "render_or_report", "tag_edits"]
