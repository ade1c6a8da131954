"""Command line driver for tripledoc.

Reads source files, extracts `///` doc blocks and writes Markdown:

    tripledoc src/lib.rs -o docs/api.md
    cat src/lib.rs | tripledoc -

Progress and validation messages go to standard error so that standard
output carries only the generated Markdown.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import Settings
from .errors import SourceReadError, TripledocError
from .extractors import extract_docs
from .generators import generate_markdown
from .models import ExtractionResult
from .validators import compute_coverage, validate_docs

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
STDIN = "-"


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tripledoc",
        description="Generate Markdown API docs from /// doc comments.",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        metavar="FILE",
        help="Source files to document ('-' reads standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write Markdown to this file instead of standard output",
    )
    parser.add_argument("--title", help="Top-level heading for the document")
    # None means "not given" so environment settings still apply
    parser.add_argument(
        "--index",
        action="store_true",
        default=None,
        help="Add a table of contents before the functions",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on unnamed or duplicate doc blocks",
    )
    parser.add_argument("--encoding", help="Source and output encoding (default: utf-8)")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const="INFO",
        help="Log progress",
    )
    verbosity.add_argument(
        "--debug",
        dest="log_level",
        action="store_const",
        const="DEBUG",
        help="Log parser details",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="log_level",
        action="store_const",
        const="ERROR",
        help="Only log errors",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def read_source(source: str, encoding: str) -> str:
    """Read one source file, or standard input for '-'.

    Raises:
        SourceReadError: If the file is missing, unreadable or not decodable.
    """
    try:
        if source == STDIN:
            return sys.stdin.buffer.read().decode(encoding)
        return Path(source).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        name = "<stdin>" if source == STDIN else source
        raise SourceReadError(name, str(e)) from e


def _extract_all(sources: list[str], encoding: str) -> list[ExtractionResult]:
    results = []
    for source in sources:
        text = read_source(source, encoding)
        name = "<stdin>" if source == STDIN else source
        result = extract_docs(text, source=name)
        log.info("%s: %d doc blocks", name, len(result.functions))
        results.append(result)
    return results


def main(argv: list[str] | None = None) -> int:
    """Generate Markdown for the given sources. Returns the exit status."""
    args = create_parser().parse_args(argv)

    try:
        settings = Settings.from_env(
            log_level=args.log_level,
            encoding=args.encoding,
            strict=args.strict,
            index=args.index,
            title=args.title,
        )
    except TripledocError as e:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
        log.error("%s", e)
        return 1
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        results = _extract_all(args.sources, settings.encoding)
    except TripledocError as e:
        log.error("%s", e)
        return 1

    validation = validate_docs(results, strict=settings.strict)
    for warning in validation.warnings:
        log.warning("%s", warning)
    if validation.errors:
        for err in validation.errors:
            log.error("%s", err)
        return 1

    coverage = compute_coverage(results)
    log.info(
        "Coverage: descriptions %.0f%%, parameters %.0f%%",
        coverage["described"] * 100,
        coverage["params"] * 100,
    )

    markdown = generate_markdown(results, title=settings.title, index=settings.index)
    if markdown:
        markdown += "\n"

    if args.output is None:
        sys.stdout.write(markdown)
        return 0

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(markdown, encoding=settings.encoding)
    except OSError as e:
        log.error("Cannot write %s: %s", args.output, e)
        return 1
    log.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
