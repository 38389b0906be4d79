"""Tests for compact rendering."""

import pytest

from xml_tidy.render import Compressor, Formatter, collapse_whitespace
from xml_tidy.shared import CompressConfig, CompressStrategy
from xml_tidy.tree import TreeBuilder

TEXTUAL = CompressConfig(strategy=CompressStrategy.TEXTUAL)


def render(content, config=None):
    return Compressor(config).render(TreeBuilder().build(content), content)


class TestCollapseWhitespace:
    """Test the textual compaction rewrites."""

    def test_between_tags(self):
        """Test whitespace between tags is removed."""
        assert collapse_whitespace("<r>\n  <a/>\n  <b/>\n</r>") == "<r><a/><b/></r>"

    def test_runs_squeezed(self):
        """Test internal runs collapse to one space and edges are trimmed."""
        assert collapse_whitespace("<a>  x \n\t y  </a>") == "<a>x y</a>"

    def test_attribute_whitespace_squeezed(self):
        """Test runs inside start tags also collapse."""
        assert collapse_whitespace('<a   b="1    2"/>') == '<a b="1 2"/>'


class TestTreeStrategy:
    """Test compaction by re-serializing the tree."""

    def test_inter_tag_whitespace_removed(self):
        """Test the canonical compact example."""
        assert render("<r> <a/> <b/> </r>") == "<r><a></a><b></b></r>"

    def test_self_close_empty(self):
        """Test empty elements in self-closing form."""
        config = CompressConfig(self_close_empty=True)

        assert render("<r> <a/> <b></b> </r>", config) == "<r><a/><b/></r>"

    def test_text_trimmed_internal_whitespace_kept(self):
        """Test text is trimmed but its inside is untouched."""
        assert render("<a>\n  two  spaces \n</a>") == "<a>two  spaces</a>"

    def test_attribute_values_untouched(self):
        """Test attribute values keep their whitespace."""
        assert render('<a b="1    2"/>') == '<a b="1    2"></a>'

    def test_output_is_single_line(self):
        """Test no newline remains between elements."""
        output = render("<r>\n  <a>\n    <b>1</b>\n  </a>\n</r>")

        assert output == "<r><a><b>1</b></a></r>"
        assert "\n" not in output

    def test_mixed_content(self):
        """Test text beside elements is trimmed."""
        assert render("<p>Hello <b>world</b> again</p>") == "<p>Hello<b>world</b>again</p>"

    def test_compress_of_formatted_matches(self):
        """Test formatting first does not change the compact form."""
        source = "<r><a x='1'>t</a><b><c>2</c></b></r>"
        formatted = Formatter().render(TreeBuilder().build(source))

        assert render(formatted) == render(source)

    def test_idempotent(self):
        """Test compressing compact output changes nothing."""
        once = render("<r>\n  <a>1</a>\n  <b/>\n</r>")

        assert render(once) == once


class TestTextualStrategy:
    """Test compaction by rewriting the source text."""

    def test_collapses_source(self):
        """Test the source text is compacted."""
        assert render("<r>\n  <a> x   y </a>\n</r>", TEXTUAL) == "<r><a>x y</a></r>"

    def test_keeps_source_tag_forms(self):
        """Test self-closing tags stay as written."""
        assert render("<r> <a/> </r>", TEXTUAL) == "<r><a/></r>"

    def test_requires_content(self):
        """Test the source text must be supplied."""
        document = TreeBuilder().build("<r/>")

        with pytest.raises(ValueError):
            Compressor(TEXTUAL).render(document)
