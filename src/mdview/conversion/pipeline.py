"""Markdown to HTML conversion pipeline.

to_html() runs a fixed sequence of whole-document text transformations:
  1. tables      -- pipe tables become <table> markup (before escaping)
  2. escaping    -- &, <, > outside tags become entities
  3. STAGES      -- fenced code, inline code, headings, emphasis, images,
                    links, rules, blockquotes, list items, list grouping
  4. paragraphs  -- blank-line blocks are wrapped in <p>

Every input string has an output; nothing here raises for malformed
Markdown.  Two opt-in ConverterOptions change the documented behavior:

  - escape_table_cells:  cell text is HTML-escaped, and the table is held in
    a vault while the tag-aware escaper runs so entities are not escaped twice.
  - protect_code_blocks: fenced code is lifted out of the raw text first,
    fully escaped, and only put back after paragraph assembly.
"""

import html
import logging

from mdview.config import ConverterOptions
from mdview.conversion.blocks import STAGES
from mdview.conversion.escaping import escape_outside_tags
from mdview.conversion.paragraphs import assemble_paragraphs
from mdview.conversion.patterns import FENCED_CODE_RE
from mdview.conversion.protect import BlockVault
from mdview.conversion.tables import extract_tables

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ConverterOptions()


def _stash_fenced_code(markdown: str, vault: BlockVault) -> str:
    """Replace each fenced code block in the raw text with a vault placeholder."""

    def _render(match) -> str:
        language, content = match.group(1), match.group(2)
        return vault.stash(f'<pre><code class="language-{language}">{html.escape(content, quote=False)}</code></pre>')

    return FENCED_CODE_RE.sub(_render, markdown)


def to_html(markdown: str, options: ConverterOptions | None = None) -> str:
    """Convert Markdown text into an HTML fragment.

    With default options the output reproduces the converter's documented
    behavior exactly, including its known quirks (unescaped table cells,
    Markdown processed inside fenced code, "<" in prose entering tag mode).
    """
    if not isinstance(markdown, str):
        raise TypeError(f"to_html() expects str, got {type(markdown).__name__}")
    options = options or DEFAULT_OPTIONS

    text = markdown
    code_vault = BlockVault("pre")
    if options.protect_code_blocks:
        text = _stash_fenced_code(text, code_vault)
        logger.debug("Protected %d fenced code block(s)", len(code_vault))

    # Tables must be rendered before escaping so their markup survives it
    if options.escape_table_cells:
        table_vault = BlockVault("table")
        text = extract_tables(text, escape_cells=True, vault=table_vault)
        text = table_vault.restore(escape_outside_tags(text))
    else:
        text = escape_outside_tags(extract_tables(text))

    for stage in STAGES:
        text = stage(text)

    text = assemble_paragraphs(text)
    if options.protect_code_blocks:
        text = code_vault.restore(text)

    logger.debug("Converted %d characters of Markdown into %d characters of HTML", len(markdown), len(text))
    return text
