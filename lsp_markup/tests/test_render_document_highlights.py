"""Rendering of DocumentHighlight objects."""

from __future__ import annotations

import pytest

from lsp_markup import DocumentHighlight, DocumentHighlightKind, TextDocument, render_document_highlights

SOURCE = "export function aFunction() { }\nfunction anotherFunction() { }"
SECOND_LINE = "\nfunction anotherFunction() { }"
INVERTED = "Found at least one DocumentHighlight with its end position being earlier than its start position."


def test_without_kind(lsp_range) -> None:
    rendered = render_document_highlights(SOURCE, [DocumentHighlight(range=lsp_range(0, 7, 0, 15))])
    assert rendered == "export <Highlight>function</Highlight> aFunction() { }" + SECOND_LINE


@pytest.mark.parametrize(
    ("kind", "name"),
    [(DocumentHighlightKind.Text, "Text"), (DocumentHighlightKind.Read, "Read"), (DocumentHighlightKind.Write, "Write")],
)
def test_with_kind(lsp_range, kind: DocumentHighlightKind, name: str) -> None:
    rendered = render_document_highlights(SOURCE, [DocumentHighlight(kind=kind, range=lsp_range(0, 7, 0, 15))])
    assert rendered == f"export <{name}>function</{name}> aFunction() {{ }}" + SECOND_LINE


def test_unknown_kind_falls_back(lsp_range) -> None:
    payload = {"kind": 0, "range": lsp_range(0, 7, 0, 15).model_dump()}
    rendered = render_document_highlights(SOURCE, [payload])
    assert rendered == "export <Highlight>function</Highlight> aFunction() { }" + SECOND_LINE


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ((0, 6), (16, 25), "<Read>export</Read> function <Write>aFunction</Write>() { }"),
        ((0, 15), (10, 25), "<Read>export fun<Write>ction</Read> aFunction</Write>() { }"),
        ((0, 15), (0, 6), "<Read><Write>export</Write> function</Read> aFunction() { }"),
        ((0, 15), (10, 15), "<Read>export fun<Write>ction</Read></Write> aFunction() { }"),
        ((0, 20), (10, 15), "<Read>export fun<Write>ction</Write> aFun</Read>ction() { }"),
        ((7, 15), (7, 15), "export <Read><Write>function</Read></Write> aFunction() { }"),
        ((7, 15), (0, 6), "<Write>export</Write> <Read>function</Read> aFunction() { }"),
    ],
    ids=[
        "non-intersecting",
        "partially-intersecting",
        "containing-on-start",
        "containing-on-end",
        "containing-completely",
        "equal-range",
        "unsorted",
    ],
)
def test_multiple(lsp_range, first: tuple[int, int], second: tuple[int, int], expected: str) -> None:
    highlights = [
        DocumentHighlight(kind=DocumentHighlightKind.Read, range=lsp_range(0, first[0], 0, first[1])),
        DocumentHighlight(kind=DocumentHighlightKind.Write, range=lsp_range(0, second[0], 0, second[1])),
    ]
    assert render_document_highlights(SOURCE, highlights) == expected + SECOND_LINE


def test_non_overlapping_order_does_not_matter(lsp_range) -> None:
    highlights = [
        DocumentHighlight(range=lsp_range(0, 0, 0, 6)),
        DocumentHighlight(range=lsp_range(0, 16, 0, 25)),
        DocumentHighlight(range=lsp_range(1, 9, 1, 24)),
    ]
    expected = render_document_highlights(SOURCE, highlights)
    assert render_document_highlights(SOURCE, list(reversed(highlights))) == expected
    assert render_document_highlights(SOURCE, [highlights[1], highlights[2], highlights[0]]) == expected


def test_multiline(lsp_range) -> None:
    source = 'export function functionName() {\n    val number = 6;\n    var string = "some string"\n}'
    highlight = DocumentHighlight(kind=DocumentHighlightKind.Read, range=lsp_range(0, 7, 2, 5))
    assert render_document_highlights(source, [highlight]) == (
        "export <Read>function functionName() {\n"
        "    val number = 6;\n"
        '    v</Read>ar string = "some string"\n'
        "}"
    )


def test_accepts_lsp_json() -> None:
    payload = {"kind": 3, "range": {"start": {"line": 1, "character": 0}, "end": {"line": 1, "character": 8}}}
    rendered = render_document_highlights(SOURCE, [payload])
    assert rendered == "export function aFunction() { }\n<Write>function</Write> anotherFunction() { }"


@pytest.mark.parametrize("document", ["", TextDocument("")], ids=["string", "text-document"])
def test_empty_document(lsp_range, document: object) -> None:
    highlight = DocumentHighlight(kind=DocumentHighlightKind.Read, range=lsp_range(2, 7, 0, 7))
    assert render_document_highlights(document, [highlight]) == ""


@pytest.mark.parametrize(
    "coordinates",
    [(2, 7, 0, 7), (0, 10, 0, 5), (0, 10, -10, 5), (0, 10, 0, -10)],
    ids=["end-line-before-start", "end-character-before-start", "end-line-negative", "end-character-negative"],
)
def test_inverted_range(lsp_range, coordinates: tuple[int, int, int, int]) -> None:
    highlight = DocumentHighlight(kind=DocumentHighlightKind.Read, range=lsp_range(*coordinates))
    assert render_document_highlights(SOURCE, [highlight]) == INVERTED


@pytest.mark.parametrize(
    ("coordinates", "expected"),
    [
        ((-10, 10, 0, 5), "<Read>expor</Read>t function aFunction() { }" + SECOND_LINE),
        ((0, -10, 0, 5), "<Read>expor</Read>t function aFunction() { }" + SECOND_LINE),
        ((10, 10, 11, 5), SOURCE + "<Read></Read>"),
        ((0, 10, 100, 5), "export fun<Read>ction aFunction() { }" + SECOND_LINE + "</Read>"),
        ((1, 100, 1, 101), SOURCE + "<Read></Read>"),
        ((0, 10, 0, 100), "export fun<Read>ction aFunction() { }</Read>" + SECOND_LINE),
    ],
    ids=[
        "start-line-before-document",
        "start-character-before-document",
        "start-line-beyond-document",
        "end-line-beyond-document",
        "start-character-beyond-document",
        "end-character-beyond-line",
    ],
)
def test_out_of_bounds_is_clamped(lsp_range, coordinates: tuple[int, int, int, int], expected: str) -> None:
    highlight = DocumentHighlight(kind=DocumentHighlightKind.Read, range=lsp_range(*coordinates))
    assert render_document_highlights(SOURCE, [highlight]) == expected
