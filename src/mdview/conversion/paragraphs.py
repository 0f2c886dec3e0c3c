"""Final assembly: split on blank lines and wrap plain blocks in <p>."""

from mdview.conversion.patterns import BLOCK_HTML_PREFIXES, BLOCK_SEPARATOR


def is_block_html(block: str) -> bool:
    """Return True if the trimmed block already starts with a block-level tag."""
    return block.startswith(BLOCK_HTML_PREFIXES)


def assemble_paragraphs(text: str) -> str:
    """Wrap every non-HTML block in <p>, turning inner newlines into <br>.

    Blocks are separated by "\\n\\n".  Blank or whitespace-only blocks are
    dropped, the rest are trimmed and joined with a single newline.
    """
    output = []
    for block in text.split(BLOCK_SEPARATOR):
        trimmed = block.strip()
        if not trimmed:
            continue
        if is_block_html(trimmed):
            output.append(trimmed)
        else:
            output.append("<p>" + trimmed.replace("\n", "<br>") + "</p>")
    return "\n".join(output)
