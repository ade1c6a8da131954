"""Doc block extraction and tag parsing for `///` comments.

A doc block is a run of consecutive lines starting with `///`. The first
line is a header of the form `name: description`, followed by more
description lines and then `@param` / `@return` tags:

    /// name: What the function does
    /// more description
    /// @param <name> <type> [= default] [description]
    /// @return <type> description

A type is either a bare token or a bracketed union such as `[int | array]`.
Parsing is permissive: malformed tags produce empty fields, never errors.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from .models import (
    ExtractionResult,
    FunctionDoc,
    LocatedBlock,
    Parameter,
    RawBlock,
    ReturnSpec,
)

log = logging.getLogger(__name__)

MARKER = "///"
PARAM_TAG = "@param"
RETURN_TAG = "@return"

# Tag must be a whole token: "@parameters" is not a tag
_TAG_RE = re.compile(rf"^\s*({re.escape(PARAM_TAG)}|{re.escape(RETURN_TAG)})(?=\s|$)")


# =============================================================================
# BLOCK EXTRACTION
# =============================================================================


def _marker_content(line: str) -> str | None:
    """Return the text after `/// ` on a marker line, or None."""
    stripped = line.rstrip("\r\n").lstrip()
    if not stripped.startswith(MARKER):
        return None
    rest = stripped[len(MARKER) :]
    if not rest:
        return ""
    if rest[0] == " ":
        return rest[1:]
    # "////" or "///x" are ordinary comments
    return None


def iter_located_blocks(lines: Iterable[str]) -> Iterator[LocatedBlock]:
    """Yield each maximal run of marker lines with its starting line number."""
    current: RawBlock = []
    start = 0
    for number, line in enumerate(lines, start=1):
        content = _marker_content(line)
        if content is None:
            if current:
                yield LocatedBlock(line_number=start, lines=current)
                current = []
            continue
        if not current:
            start = number
        current.append(content)
    if current:
        yield LocatedBlock(line_number=start, lines=current)


def iter_blocks(lines: Iterable[str]) -> Iterator[RawBlock]:
    """Yield the raw content of each doc block in source order."""
    for block in iter_located_blocks(lines):
        yield block.lines


# =============================================================================
# TAG PARSING
# =============================================================================


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _next_token(text: str, pos: int) -> tuple[str, int]:
    """Read the whitespace-delimited token at or after pos.

    Returns the token ("" at end of line) and the position just past it.
    """
    start = _skip_space(text, pos)
    end = start
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[start:end], end


def _parse_types(text: str, pos: int) -> tuple[list[str], int]:
    """Parse a bare type token or a bracketed `[a | b]` union."""
    pos = _skip_space(text, pos)
    if pos < len(text) and text[pos] == "[":
        close = text.find("]", pos + 1)
        if close == -1:
            # Unterminated union closes at end of line
            inner, pos = text[pos + 1 :], len(text)
        else:
            inner, pos = text[pos + 1 : close], close + 1
        return [t.strip() for t in inner.split("|") if t.strip()], pos

    token, pos = _next_token(text, pos)
    return ([token] if token else []), pos


def _parse_param(body: str) -> Parameter:
    """Parse the text after `@param`: name, type, optional `= default`, description."""
    name, pos = _next_token(body, 0)
    types, pos = _parse_types(body, pos)

    default = None
    token, after = _next_token(body, pos)
    if token == "=":
        default, pos = _next_token(body, after)

    # Description keeps its internal spacing
    return Parameter(
        name=name,
        types=types,
        default=default,
        description=body[pos:].lstrip(),
    )


def _parse_return(body: str) -> ReturnSpec:
    """Parse the text after `@return`: type, description."""
    types, pos = _parse_types(body, 0)
    return ReturnSpec(types=types, description=body[pos:].lstrip())


def _split_header(line: str) -> tuple[str, str]:
    """Split `name: description` at the first colon.

    Without a colon the name is empty and the whole line is description.
    """
    name, sep, rest = line.partition(":")
    if not sep:
        return "", line
    if rest.startswith(" "):
        rest = rest[1:]
    return name.strip(), rest


def parse_block(block: RawBlock, line_number: int = 0) -> FunctionDoc:
    """Parse one raw doc block into a FunctionDoc.

    Never raises. Lines that are neither tags nor description (free text
    after the first tag, and any `@return` after the first) are kept in
    `ignored` and not rendered.
    """
    doc = FunctionDoc(name="", line_number=line_number)
    if not block:
        return doc

    # The first line is always the header, even when it starts with a tag
    doc.name, first = _split_header(block[0])
    # A header-only block adds no empty line, so the fragment ends on the heading
    if first or len(block) > 1:
        doc.description.append(first)

    in_tags = False
    for line in block[1:]:
        match = _TAG_RE.match(line)
        if match is None:
            if in_tags:
                doc.ignored.append(line)
            else:
                doc.description.append(line)
            continue

        in_tags = True
        tag, body = match.group(1), line[match.end() :]
        if tag == PARAM_TAG:
            doc.parameters.append(_parse_param(body))
        elif doc.returns is None:
            doc.returns = _parse_return(body)
        else:
            doc.ignored.append(line)

    if not doc.name:
        log.debug("Doc block at line %d has no name", line_number)
    if doc.ignored:
        log.debug(
            "Doc block %r at line %d: ignored %d line(s)",
            doc.name,
            line_number,
            len(doc.ignored),
        )
    return doc


def extract_docs(text: str, source: str = "<string>") -> ExtractionResult:
    """Extract and parse every doc block in a source text, in source order."""
    functions = [
        parse_block(block.lines, block.line_number)
        for block in iter_located_blocks(text.split("\n"))
    ]
    log.debug("Extracted %d doc blocks from %s", len(functions), source)
    return ExtractionResult(source=source, functions=functions)
