"""Unit tests for tag-aware escaping, including its documented tag-mode gap."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from mdview.conversion.escaping import escape_outside_tags


class TestEscapeOutsideTags:

    def test_ampersand(self):
        assert escape_outside_tags("foo & bar") == "foo &amp; bar"

    def test_lone_greater_than(self):
        assert escape_outside_tags("10 > 5") == "10 &gt; 5"

    def test_quote_marker_escaped(self):
        assert escape_outside_tags("> quote") == "&gt; quote"

    def test_tags_preserved_content_escaped(self):
        result = escape_outside_tags("<table>content & more</table>")
        assert result == "<table>content &amp; more</table>"

    def test_attributes_copied_verbatim(self):
        assert escape_outside_tags('<pre data-x="a&b"></pre>') == '<pre data-x="a&b"></pre>'

    def test_plain_text_unchanged(self):
        assert escape_outside_tags("nothing to do here") == "nothing to do here"

    def test_empty(self):
        assert escape_outside_tags("") == ""

    def test_less_than_in_prose_enters_tag_mode(self):
        # Known gap: "<" starts tag mode, text up to the next ">" is copied as-is
        assert escape_outside_tags("5 < 10 & 10 > 3 & x") == "5 < 10 & 10 > 3 &amp; x"

    def test_unclosed_tag_mode_runs_to_end(self):
        assert escape_outside_tags("a < b & c") == "a < b & c"

    def test_script_tag_not_escaped(self):
        assert escape_outside_tags("<script>alert('x')</script>") == "<script>alert('x')</script>"

    def test_less_than_inside_tag_copied(self):
        assert escape_outside_tags("<a<b>c>") == "<a<b>c&gt;"
