"""mdview: a lightweight, pattern-driven Markdown to HTML fragment converter."""

from mdview.config import ConverterOptions
from mdview.conversion.escaping import escape_outside_tags
from mdview.conversion.pipeline import to_html
from mdview.conversion.tables import extract_tables, table_lines_to_html

__all__ = [
    "ConverterOptions",
    "escape_outside_tags",
    "extract_tables",
    "table_lines_to_html",
    "to_html",
]
