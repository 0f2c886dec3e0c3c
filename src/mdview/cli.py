"""Command line entry point: convert a Markdown file to an HTML fragment.

Usage:
    mdview README.md -o readme.html
    cat notes.md | mdview --protect-code-blocks

The fragment is written as-is; wrapping it in a full HTML document is left
to the caller.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from mdview.config import ROOT, ConverterOptions, load_options, log_level
from mdview.conversion.pipeline import to_html

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdview", description="Convert Markdown to an HTML fragment")
    parser.add_argument("file", nargs="?", default="-", help="Markdown file to convert (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write HTML here instead of stdout")
    parser.add_argument("--escape-table-cells", action="store_true", help="HTML-escape the text of table cells")
    parser.add_argument("--protect-code-blocks", action="store_true", help="Keep fenced code out of later Markdown stages")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $MDVIEW_LOG_LEVEL or INFO)")
    return parser


def resolve_options(args: argparse.Namespace) -> ConverterOptions:
    """Merge command line flags over the MDVIEW_* environment options."""
    env_options = load_options()
    return ConverterOptions(
        escape_table_cells=args.escape_table_cells or env_options.escape_table_cells,
        protect_code_blocks=args.protect_code_blocks or env_options.protect_code_blocks,
    )


def _read_input(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    with open(file_arg, "r", encoding="utf-8") as fopen:
        return fopen.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(ROOT / ".env")
    level = (args.log_level or log_level()).upper()
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", stream=sys.stderr)

    options = resolve_options(args)
    logger.debug("Converter options: %s", options.model_dump())

    try:
        markdown = _read_input(args.file)
    except OSError as exc:
        logger.error("Could not read %s: %s", args.file, exc)
        return 1

    fragment = to_html(markdown, options)

    if args.output is None:
        sys.stdout.write(fragment + "\n")
        return 0
    try:
        args.output.write_text(fragment + "\n", encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write %s: %s", args.output, exc)
        return 1
    logger.info("Wrote %d characters to %s", len(fragment), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
