"""Pipe-table detection and HTML rendering.

Runs on the raw Markdown before any escaping.  A table is a header row
containing "|", immediately followed by a separator row such as
``|---|:--:|``, followed by zero or more body rows containing "|".  The whole
span is replaced by a single line of ``<table>`` markup; every other line
passes through untouched.

Limitations
-----------
- Column counts are not validated; short or long rows render as-is.
- Cell text is emitted verbatim unless ``escape_cells`` is requested, so
  markup inside a cell reaches the output unescaped.
- Alignment colons in the separator are accepted but not rendered.
"""

import html
import logging

from pydantic import BaseModel

from mdview.conversion.patterns import SEPARATOR_CHARS, TABLE_TRIM_CHARS
from mdview.conversion.protect import BlockVault

logger = logging.getLogger(__name__)


class TableBlock(BaseModel):
    """Cells of one detected table, separator row already discarded."""

    header_cells: list[str]
    body_rows: list[list[str]]


# ─── Row Helpers ──────────────────────────────────────────────────────────────


def is_separator_row(line: str) -> bool:
    """Return True if the (trimmed) line is a table separator like '|---|:-:|'."""
    if "|" not in line or "-" not in line:
        return False
    remainder = line
    for char in SEPARATOR_CHARS:
        remainder = remainder.replace(char, "")
    return remainder == ""


def parse_cells(line: str) -> list[str]:
    """Split a row on '|' and trim each cell, dropping the empty edge cells of '| a | b |'."""
    cells = [cell.strip(TABLE_TRIM_CHARS) for cell in line.split("|")]
    if cells and cells[0] == "":
        cells.pop(0)
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def parse_table(lines: list[str]) -> TableBlock:
    """Build a TableBlock from header, separator and body lines."""
    return TableBlock(
        header_cells=parse_cells(lines[0]),
        body_rows=[parse_cells(line) for line in lines[2:]],
    )


# ─── HTML Rendering ───────────────────────────────────────────────────────────


def _render_html(table: TableBlock, escape_cells: bool = False) -> str:
    """Render a TableBlock as <table> markup with a <thead> and a <tbody>."""

    def cell_text(cell: str) -> str:
        return html.escape(cell, quote=False) if escape_cells else cell

    parts = ["<table>\n<thead>\n<tr>"]
    parts.extend(f"<th>{cell_text(cell)}</th>" for cell in table.header_cells)
    parts.append("</tr>\n</thead>\n<tbody>\n")

    for row in table.body_rows:
        parts.append("<tr>")
        parts.extend(f"<td>{cell_text(cell)}</td>" for cell in row)
        parts.append("</tr>\n")

    parts.append("</tbody>\n</table>")
    return "".join(parts)


def table_lines_to_html(lines: list[str], *, escape_cells: bool = False) -> str:
    """Convert table lines (header, separator, body rows) into <table> HTML.

    Fewer than two lines cannot form a table and are returned joined with
    newlines, unchanged.  The separator line is never inspected here.
    """
    lines = list(lines)
    if len(lines) < 2:
        return "\n".join(lines)
    return _render_html(parse_table(lines), escape_cells=escape_cells)


# ─── Document Scanner ─────────────────────────────────────────────────────────


def _collect_body_rows(lines: list[str], start: int) -> int:
    """Return the index of the first line at or after *start* that is not a body row."""
    idx = start
    while idx < len(lines):
        row = lines[idx].strip(TABLE_TRIM_CHARS)
        if "|" not in row:
            break
        idx += 1
    return idx


def extract_tables(markdown: str, *, escape_cells: bool = False, vault: BlockVault | None = None) -> str:
    """Replace every pipe table in *markdown* with one block of <table> HTML.

    Scans line by line.  When a line containing "|" is followed by a valid
    separator row, the header, separator and all following "|" rows are
    consumed and replaced in place; scanning resumes after the inserted line.
    Text without a header/separator pair is returned byte-for-byte.

    When *vault* is given, the rendered HTML is stashed there and a
    placeholder takes its place in the returned text.
    """
    lines = markdown.split("\n")
    output: list[str] = []
    found = 0
    idx = 0

    while idx < len(lines):
        line = lines[idx].strip(TABLE_TRIM_CHARS)
        if "|" in line and idx + 1 < len(lines):
            next_line = lines[idx + 1].strip(TABLE_TRIM_CHARS)
            if is_separator_row(next_line):
                end = _collect_body_rows(lines, idx + 2)
                table_lines = [line, next_line] + [row.strip(TABLE_TRIM_CHARS) for row in lines[idx + 2 : end]]
                table_html = table_lines_to_html(table_lines, escape_cells=escape_cells)
                output.append(vault.stash(table_html) if vault is not None else table_html)
                found += 1
                idx = end
                continue
        output.append(lines[idx])
        idx += 1

    if found:
        logger.debug("Rendered %d table(s)", found)
    return "\n".join(output)
