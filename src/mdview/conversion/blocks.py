"""Block and inline substitution stages.

Each function applies one pattern class over the whole document and returns
the new document.  STAGES lists them in the order the pipeline runs them;
that order is load-bearing:

  - Emphasis runs before list items and rules, so a bare "***" line becomes
    "<em>*</em>" rather than "<hr>", and "a * b * c" gains an <em> span.
  - Images run before links so "![alt](src)" is never read as a link.
  - Blockquotes match "&gt; " because escaping has already run.
  - Ordered and unordered items both end up inside a <ul>; no <ol> is emitted.

Fenced code content is not shielded from the later stages (see
protect.BlockVault for the opt-in alternative).
"""

from mdview.conversion.patterns import (
    BLOCKQUOTE_RE,
    BOLD_ITALIC_RE,
    BOLD_RE,
    FENCED_CODE_RE,
    HEADING_RES,
    HORIZONTAL_RULE_RE,
    IMAGE_RE,
    INLINE_CODE_RE,
    ITALIC_RE,
    LINK_RE,
    LIST_RUN_RE,
    ORDERED_ITEM_RE,
    UNORDERED_ITEM_RE,
)

# ─── Code ─────────────────────────────────────────────────────────────────────


def render_fenced_code(text: str) -> str:
    """```lang ... ``` -> <pre><code class="language-lang">...</code></pre>."""
    return FENCED_CODE_RE.sub(r'<pre><code class="language-\1">\2</code></pre>', text)


def render_inline_code(text: str) -> str:
    return INLINE_CODE_RE.sub(r"<code>\1</code>", text)


# ─── Headings & Emphasis ──────────────────────────────────────────────────────


def render_headings(text: str) -> str:
    """Apply the six heading passes, "######" first and "#" last.

    Exactly N hashes and a space are required, so "#Title" and "####### Title"
    are left alone.
    """
    for level, pattern in HEADING_RES:
        text = pattern.sub(rf"<h{level}>\1</h{level}>", text)
    return text


def render_emphasis(text: str) -> str:
    """***x*** -> strong+em, then **x** -> strong, then *x* -> em."""
    text = BOLD_ITALIC_RE.sub(r"<strong><em>\1</em></strong>", text)
    text = BOLD_RE.sub(r"<strong>\1</strong>", text)
    return ITALIC_RE.sub(r"<em>\1</em>", text)


# ─── Images & Links ───────────────────────────────────────────────────────────


def render_images(text: str) -> str:
    return IMAGE_RE.sub(r'<img src="\2" alt="\1">', text)


def render_links(text: str) -> str:
    return LINK_RE.sub(r'<a href="\2">\1</a>', text)


# ─── Line Blocks ──────────────────────────────────────────────────────────────


def render_horizontal_rules(text: str) -> str:
    return HORIZONTAL_RULE_RE.sub("<hr>", text)


def render_blockquotes(text: str) -> str:
    """Each quoted line becomes its own <blockquote>; consecutive lines are not merged."""
    return BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", text)


def render_list_items(text: str) -> str:
    """'* x', '- x' and 'N. x' lines -> <li>x</li>.  '+ x' is not a list item."""
    text = UNORDERED_ITEM_RE.sub(r"<li>\1</li>", text)
    return ORDERED_ITEM_RE.sub(r"<li>\1</li>", text)


def group_list_items(text: str) -> str:
    """Wrap each run of adjacent <li> lines in a single <ul>."""
    return LIST_RUN_RE.sub(r"<ul>\g<0></ul>", text)


# Pipeline order (after table extraction and escaping, before paragraphs)
STAGES = (
    render_fenced_code,
    render_inline_code,
    render_headings,
    render_emphasis,
    render_images,
    render_links,
    render_horizontal_rules,
    render_blockquotes,
    render_list_items,
    group_list_items,
)
