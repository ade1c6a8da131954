"""tripledoc - Markdown API docs from `///` doc comments.

This package provides:
- Block extraction and tag parsing: iter_blocks, parse_block, extract_docs
- Markdown rendering: render_function, render_document, render_source
- Data models: FunctionDoc, Parameter, ReturnSpec
"""

__version__ = "0.1.0"

from tripledoc.errors import ConfigError, SourceReadError, TripledocError
from tripledoc.extractors import extract_docs, iter_blocks, parse_block
from tripledoc.generators import render_document, render_function, render_source
from tripledoc.models import FunctionDoc, Parameter, ReturnSpec

__all__ = [
    "ConfigError",
    "FunctionDoc",
    "Parameter",
    "ReturnSpec",
    "SourceReadError",
    "TripledocError",
    "extract_docs",
    "iter_blocks",
    "parse_block",
    "render_document",
    "render_function",
    "render_source",
]
