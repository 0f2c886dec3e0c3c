"""Compiled regex patterns and constant tuples for Markdown conversion.

Each pattern is applied once, globally, over the whole document by the
matching stage in blocks.py.  Line-anchored patterns use re.MULTILINE; ``.``
never crosses a newline, so inline spans are confined to one line.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

# Characters a separator row may consist of (besides at least one "-")
SEPARATOR_CHARS = ("|", "-", ":", " ")

# Horizontal whitespace trimmed from table lines and cells (newlines are kept)
TABLE_TRIM_CHARS = " \t"


# ─── Code Patterns ────────────────────────────────────────────────────────────

# ```lang\n ... ``` -- language tag optional, body captured lazily across lines
FENCED_CODE_RE = re.compile(r"```(\w*)\n([\s\S]*?)```")

# `code` -- no backtick inside the span
INLINE_CODE_RE = re.compile(r"`([^`]+)`")


# ─── Heading Patterns ─────────────────────────────────────────────────────────

# Level -> "^#{level} (text)$", applied from level 6 down to level 1
HEADING_RES = tuple((level, re.compile(rf"^{'#' * level} (.+)$", re.MULTILINE)) for level in range(6, 0, -1))


# ─── Emphasis Patterns ────────────────────────────────────────────────────────

BOLD_ITALIC_RE = re.compile(r"\*\*\*(.+?)\*\*\*")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_RE = re.compile(r"\*(.+?)\*")


# ─── Link Patterns ────────────────────────────────────────────────────────────

# ![alt](url) -- alt may be empty; neither part spans a newline
IMAGE_RE = re.compile(r"!\[([^\]\n]*?)\]\(([^)\n]+)\)")

# [label](url) -- single line; runs after IMAGE_RE so images are never read as links
LINK_RE = re.compile(r"\[([^\]\n]+?)\]\(([^)\n]+)\)")


# ─── Block Patterns ───────────────────────────────────────────────────────────

# A line of 3+ "-", "*" or "_" and nothing else
HORIZONTAL_RULE_RE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$", re.MULTILINE)

# "> quote" after escaping has turned ">" into "&gt;"
BLOCKQUOTE_RE = re.compile(r"^&gt; (.+)$", re.MULTILINE)

# "* item" or "- item"
UNORDERED_ITEM_RE = re.compile(r"^[*-] (.+)$", re.MULTILINE)

# "12. item" -- the number is discarded
ORDERED_ITEM_RE = re.compile(r"^\d+\. (.+)$", re.MULTILINE)

# One or more adjacent <li> lines
LIST_RUN_RE = re.compile(r"(<li>.*?</li>\n?)+")


# ─── Paragraph Constants ──────────────────────────────────────────────────────

# Blank-line separator between paragraph blocks
BLOCK_SEPARATOR = "\n\n"

# Blocks starting with one of these are already block-level HTML
BLOCK_HTML_PREFIXES = ("<h", "<ul", "<ol", "<pre", "<blockquote", "<hr", "<table")
