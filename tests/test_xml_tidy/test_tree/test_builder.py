"""Tests for source-preserving tree construction."""

import pytest

from xml_tidy.shared import MalformedXmlError
from xml_tidy.tree import (
    Document,
    Element,
    ExpatBackend,
    Text,
    TreeBuilder,
    parse_attributes,
    parse_document,
)


class TestParseAttributes:
    """Test splitting the attribute section of a start tag."""

    def test_order_preserved(self):
        """Test attributes come back in source order."""
        assert parse_attributes(' z="1" a="2" m="3"') == [("z", "1"), ("a", "2"), ("m", "3")]

    def test_single_and_double_quotes(self):
        """Test both quote styles yield the raw value."""
        assert parse_attributes(" a='x' b=\"y\"") == [("a", "x"), ("b", "y")]

    def test_spaces_around_equals(self):
        """Test whitespace around '=' is allowed."""
        assert parse_attributes(' a = "1"') == [("a", "1")]

    def test_values_are_raw(self):
        """Test references inside values are not decoded."""
        assert parse_attributes(' a="x &amp; &#65;"') == [("a", "x &amp; &#65;")]

    def test_namespaced_names(self):
        """Test prefixed attribute names pass through."""
        assert parse_attributes(' xmlns:x="urn:x" x:id="1"') == [
            ("xmlns:x", "urn:x"),
            ("x:id", "1"),
        ]

    def test_duplicate_name_rejected(self):
        """Test a repeated attribute name raises."""
        with pytest.raises(MalformedXmlError):
            parse_attributes(' a="1" a="2"')


class TestTreeBuilder:
    """Test building documents from well-formed content."""

    def test_nested_structure(self):
        """Test elements and text nest as in the source."""
        document = TreeBuilder().build("<r><a>1</a><b><c>2</c></b></r>")

        assert document.root == Element("r", [], [
            Element("a", [], [Text("1")]),
            Element("b", [], [Element("c", [], [Text("2")])]),
        ])

    def test_self_closing_element(self):
        """Test a self-closing tag produces an element without children."""
        document = TreeBuilder().build('<r><a x="1"/></r>')

        assert document.root.children == [Element("a", [("x", "1")], [])]

    def test_whitespace_text_is_kept_in_tree(self):
        """Test whitespace between elements is represented as text nodes."""
        document = TreeBuilder().build("<r>\n  <a/>\n</r>")

        assert document.root.children == [
            Text("\n  "),
            Element("a"),
            Text("\n"),
        ]
        assert document.root.significant_children == [Element("a")]

    def test_cdata_and_text_merge(self):
        """Test adjacent character data and CDATA form one text node."""
        document = TreeBuilder().build("<r>a<![CDATA[<b>]]>c</r>")

        assert document.root.children == [Text("a<![CDATA[<b>]]>c")]

    def test_comment_and_pi_skipped(self):
        """Test comments and processing instructions are not in the tree."""
        document = TreeBuilder().build("<r>a<!-- note -->b<?pi data?><c/></r>")

        assert document.root.children == [Text("ab"), Element("c")]

    def test_top_level_comments_skipped(self):
        """Test nodes around the root element are ignored."""
        document = TreeBuilder().build("<!--a--><r/><!--b-->\n")

        assert document.elements == [Element("r")]

    def test_doctype_in_content_skipped(self):
        """Test a DOCTYPE left in the content does not reach the tree."""
        document = TreeBuilder().build('<!DOCTYPE r [<!ENTITY e "v">]><r/>')

        assert document.root == Element("r")

    def test_entity_references_are_raw(self):
        """Test text keeps references as written."""
        document = TreeBuilder().build("<r>&lt;tag&gt; &#x41;</r>")

        assert document.root.children == [Text("&lt;tag&gt; &#x41;")]

    def test_end_tag_with_trailing_space(self):
        """Test whitespace before '>' in an end tag is accepted."""
        document = TreeBuilder().build("<r><a>1</a  ></r >")

        assert document.root.find("a").children == [Text("1")]

    def test_mismatched_closing_tag(self):
        """Test a wrong end tag raises with a location."""
        with pytest.raises(MalformedXmlError) as exc_info:
            TreeBuilder().build("<a>\n<b></a>")

        assert exc_info.value.line == 2

    def test_unclosed_element(self):
        """Test a missing end tag raises."""
        with pytest.raises(MalformedXmlError, match="not closed"):
            TreeBuilder().build("<a><b></b>")

    def test_multiple_roots(self):
        """Test more than one top-level element raises."""
        with pytest.raises(MalformedXmlError, match="exactly one root"):
            TreeBuilder().build("<a/><b/>")

    def test_no_root(self):
        """Test content without elements raises."""
        with pytest.raises(MalformedXmlError):
            TreeBuilder().build("  ")

    def test_unexpected_markup(self):
        """Test a stray '<' raises."""
        with pytest.raises(MalformedXmlError, match="unexpected markup"):
            TreeBuilder().build("<r>< </r>")


class TestParseDocument:
    """Test validation followed by construction."""

    def test_default_backend(self):
        """Test parsing with the lxml backend."""
        document = parse_document('<r a="1"><b>x</b></r>')

        assert isinstance(document, Document)
        assert document.root.get_attribute("a") == "1"
        assert document.root.find("b").children == [Text("x")]

    def test_explicit_backend(self):
        """Test parsing with the expat backend."""
        document = parse_document("<r><b/></r>", backend=ExpatBackend())

        assert document.element_count == 2

    def test_invalid_content_never_builds(self):
        """Test the backend rejects content before the builder runs."""
        with pytest.raises(MalformedXmlError):
            parse_document("<r><b></r>")
