"""Tests for markdown rendering."""

from tripledoc.extractors import extract_docs, parse_block
from tripledoc.generators import (
    generate_index,
    generate_markdown,
    render_document,
    render_function,
    render_source,
)
from tripledoc.models import FunctionDoc, Parameter, ReturnSpec


def test_param_without_default_has_double_space():
    doc = parse_block(["q: Ask", "@param q_body content Question Body"])
    assert render_function(doc).splitlines()[-1] == "q_body: `content`  Question Body"


def test_param_with_default():
    doc = parse_block(["v: Space", "@param lines int = 1 lines of space..."])
    assert (
        render_function(doc).splitlines()[-1]
        == "lines: `int` (default: 1) lines of space..."
    )


def test_union_rendering():
    doc = parse_block(["f: d", "@param cols [int | array] columns"])
    assert render_function(doc).splitlines()[-1] == "cols: `int | array`  columns"


def test_full_block():
    source = [
        "/// _num_to_fr_units: Map a number into a tuple of 1fr units",
        "/// primarily used to make optional column passing easier",
        "/// @param num int number to map",
        "/// @return array Array of num fr units",
    ]
    assert render_source(source) == "\n".join(
        [
            "## _num_to_fr_units",
            "Map a number into a tuple of 1fr units",
            "primarily used to make optional column passing easier",
            "### Parameters:",
            "num: `int`  number to map",
            "### Returns:",
            "`array` Array of num fr units",
        ]
    )


def test_header_only():
    doc = parse_block(["divider: Draw a horizontal rule"])
    assert render_function(doc) == "## divider\nDraw a horizontal rule"


def test_return_without_params():
    doc = parse_block(["now: Current time", "@return datetime the time"])
    assert render_function(doc) == "\n".join(
        ["## now", "Current time", "### Returns:", "`datetime` the time"]
    )


def test_unnamed_block_renders_empty_heading():
    doc = parse_block(["sends a request"])
    assert render_function(doc) == "## \nsends a request"


def test_tag_on_first_line_renders_as_header():
    source = ["/// @param x int: the x", "/// @return int y"]
    assert render_source(source) == "## @param x int\nthe x\n### Returns:\n`int` y"


def test_empty_header_description_keeps_blank_line():
    source = ["/// reset:", "/// @param x int the x"]
    assert render_source(source) == "## reset\n\n### Parameters:\nx: `int`  the x"


def test_header_only_empty_description():
    assert render_source(["/// reset:"]) == "## reset"


def test_malformed_param_renders():
    doc = FunctionDoc(name="f", parameters=[Parameter(name="url")])
    assert render_function(doc) == "## f\n### Parameters:\nurl: ``  "


def test_return_union():
    doc = FunctionDoc(
        name="f", returns=ReturnSpec(types=["int", "none"], description="maybe")
    )
    assert render_function(doc).splitlines()[-1] == "`int | none` maybe"


def test_document_order_and_separation():
    source = [
        "/// b: second letter",
        "code",
        "/// a: first letter",
        "/// @param x int = 0",
    ]
    assert render_source(source) == "\n".join(
        [
            "## b",
            "second letter",
            "",
            "## a",
            "first letter",
            "### Parameters:",
            "x: `int` (default: 0) ",
        ]
    )


def test_empty_document():
    assert render_source(["fn main() {}"]) == ""
    assert render_document([]) == ""


class TestIndex:
    def test_links_named_functions(self):
        docs = [
            parse_block(["Grid Layout: a | b"]),
            parse_block(["no name here"]),
            parse_block(["_cell: one cell"]),
        ]
        assert generate_index(docs) == "\n".join(
            [
                "| Function | Description |",
                "|----------|-------------|",
                "| [`Grid Layout`](#grid-layout) | a \\| b |",
                "| [`_cell`](#_cell) | one cell |",
            ]
        )

    def test_nothing_named(self):
        assert generate_index([parse_block(["anonymous"])]) == ""


class TestGenerateMarkdown:
    def test_plain_matches_document(self):
        result = extract_docs("/// f: one\n/// @return int n")
        assert generate_markdown([result]) == render_document(result.functions)

    def test_title_and_index(self):
        result = extract_docs("/// f: one")
        assert generate_markdown([result], title="API", index=True) == "\n".join(
            [
                "# API",
                "",
                "| Function | Description |",
                "|----------|-------------|",
                "| [`f`](#f) | one |",
                "",
                "## f",
                "one",
            ]
        )

    def test_multiple_sources(self):
        first = extract_docs("/// a: one", source="a.rs")
        empty = extract_docs("fn x() {}", source="b.rs")
        second = extract_docs("/// c: three", source="c.rs")
        assert generate_markdown([first, empty, second]) == "## a\none\n\n## c\nthree"

    def test_nothing_to_render(self):
        assert generate_markdown([extract_docs("")], title=None, index=True) == ""
