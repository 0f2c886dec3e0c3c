"""Placeholder vault used by the opt-in hardening options.

A rendered block is swapped for an empty placeholder element of the same
tag, e.g. ``<pre data-mdview-block="3f2a...-0"></pre>``.  The placeholder is
inert for every stage: the escaper copies it in tag mode, no Markdown pattern
matches it, and paragraph assembly sees a block-level prefix.  restore()
swaps the stored HTML back in.

Each vault carries a random token, so placeholder-shaped text already present
in the input is never mistaken for a stashed block.
"""

import re
import uuid


class BlockVault:
    """Stores rendered HTML blocks behind numbered placeholder tags."""

    def __init__(self, tag: str):
        self.tag = tag
        self.token = uuid.uuid4().hex
        self._blocks: list[str] = []
        self._placeholder_re = re.compile(rf'<{re.escape(tag)} data-mdview-block="{self.token}-(\d+)"></{re.escape(tag)}>')

    def __len__(self) -> int:
        return len(self._blocks)

    def placeholder(self, index: int) -> str:
        return f'<{self.tag} data-mdview-block="{self.token}-{index}"></{self.tag}>'

    def stash(self, block_html: str) -> str:
        """Store *block_html* and return the placeholder that stands in for it."""
        self._blocks.append(block_html)
        return self.placeholder(len(self._blocks) - 1)

    def restore(self, text: str) -> str:
        """Replace every placeholder in *text* with its stored HTML.

        Placeholders with this vault's token but an unknown index are left as they are.
        """

        def _swap(match: re.Match) -> str:
            index = int(match.group(1))
            if index < len(self._blocks):
                return self._blocks[index]
            return match.group(0)

        return self._placeholder_re.sub(_swap, text)
