"""Tag-aware HTML entity escaping.

Runs after table extraction so the generated <table> markup survives.  A
single left-to-right scan with one flag: outside a tag, "&", "<" and ">" are
replaced by entities; a "<" seen outside a tag switches into tag mode, and
everything up to and including the next ">" is copied verbatim.

Known gap: a "<" in ordinary prose (e.g. "5 < 10 > 3") also enters tag mode,
so the text up to the next ">" is left unescaped.
"""

ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def escape_outside_tags(text: str) -> str:
    """Escape &, <, > outside of <...> tags and copy tag text verbatim."""
    result: list[str] = []
    inside_tag = False

    for char in text:
        if char == "<" and not inside_tag:
            inside_tag = True
            result.append(char)
        elif char == ">" and inside_tag:
            inside_tag = False
            result.append(char)
        elif inside_tag:
            result.append(char)
        else:
            result.append(ENTITIES.get(char, char))

    return "".join(result)
