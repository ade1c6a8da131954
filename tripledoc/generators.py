"""Markdown output for parsed doc blocks."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .extractors import iter_blocks, parse_block
from .models import ExtractionResult, FunctionDoc, Parameter


def _slugify(name: str) -> str:
    """Convert a heading to a GitHub-style markdown anchor."""
    # Lowercase, drop punctuation except - and _, spaces become hyphens
    return re.sub(r"[^\w\- ]", "", name.strip().lower()).replace(" ", "-")


def _format_parameter(param: Parameter) -> str:
    # No default still leaves one space, so the description follows two spaces
    if param.default is not None:
        default = f"(default: {param.default}) "
    else:
        default = " "
    return f"{param.name}: `{param.type_text}` {default}{param.description}"


def render_function(doc: FunctionDoc) -> str:
    """Render one FunctionDoc as a markdown fragment without a trailing newline."""
    lines = [f"## {doc.name}"]
    lines.extend(doc.description)

    if doc.parameters:
        lines.append("### Parameters:")
        for param in doc.parameters:
            lines.append(_format_parameter(param))

    if doc.returns is not None:
        lines.append("### Returns:")
        lines.append(f"`{doc.returns.type_text}` {doc.returns.description}")

    return "\n".join(lines)


def render_document(docs: Iterable[FunctionDoc]) -> str:
    """Render fragments in order, separated by one blank line."""
    return "\n\n".join(render_function(doc) for doc in docs)


def render_source(lines: Iterable[str]) -> str:
    """Extract, parse and render all doc blocks from source lines."""
    return render_document(parse_block(block) for block in iter_blocks(lines))


def generate_index(docs: Iterable[FunctionDoc]) -> str:
    """Generate a function table with links to each heading.

    Blocks without a name have no usable anchor and are left out.
    Returns "" when nothing is named.
    """
    rows = []
    for doc in docs:
        if not doc.name:
            continue
        brief = doc.description[0].strip() if doc.description else ""
        desc = brief.replace("|", "\\|")
        rows.append(f"| [`{doc.name}`](#{_slugify(doc.name)}) | {desc} |")

    if not rows:
        return ""

    lines = [
        "| Function | Description |",
        "|----------|-------------|",
    ]
    lines.extend(rows)
    return "\n".join(lines)


def generate_markdown(
    results: list[ExtractionResult],
    title: str | None = None,
    index: bool = False,
) -> str:
    """Assemble the full output document for one or more sources.

    Sections (title, index, each source's functions) are separated by one
    blank line. Empty sections are skipped.
    """
    sections = []

    if title:
        sections.append(f"# {title}")

    if index:
        table = generate_index(f for r in results for f in r.functions)
        if table:
            sections.append(table)

    for result in results:
        body = render_document(result.functions)
        if body:
            sections.append(body)

    return "\n\n".join(sections)
