"""Tests for the document node model."""

import pytest

from xml_tidy.tree import Document, Element, Text


def _sample_document():
    return Document(children=[
        Element("r", [("id", "1")], [
            Text("\n  "),
            Element("a", [], [Text(" x ")]),
            Element("b", [], [Element("a"), Element("c", [], [Element("d")])]),
        ]),
    ])


class TestText:
    """Test text node helpers."""

    @pytest.mark.parametrize("value", ["", " ", "\n\t\r  "])
    def test_whitespace_only(self, value):
        """Test XML whitespace is recognized."""
        assert Text(value).is_whitespace is True

    def test_not_whitespace(self):
        """Test text with content is significant."""
        assert Text(" a ").is_whitespace is False

    def test_non_xml_whitespace_is_content(self):
        """Test a no-break space is not XML whitespace."""
        assert Text("\u00a0").is_whitespace is False
        assert Text(" \u00a0 ").stripped == "\u00a0"

    def test_stripped(self):
        """Test leading and trailing whitespace are removed."""
        assert Text("\n  hello  world \t").stripped == "hello  world"


class TestElement:
    """Test element node helpers."""

    def test_empty_name_rejected(self):
        """Test an element must have a name."""
        with pytest.raises(ValueError):
            Element("")

    def test_defaults(self):
        """Test attributes and children default to empty lists."""
        element = Element("a")

        assert element.attributes == []
        assert element.children == []

    def test_children_views(self):
        """Test element, text and significant child views."""
        root = _sample_document().root

        assert [e.name for e in root.element_children] == ["a", "b"]
        assert root.text_children == [Text("\n  ")]
        assert [c.name for c in root.significant_children] == ["a", "b"]

    def test_names(self):
        """Test prefix and local name split."""
        element = Element("soap:Envelope")

        assert element.prefix == "soap"
        assert element.local_name == "Envelope"
        assert Element("plain").prefix is None

    def test_attributes(self):
        """Test attribute lookup."""
        element = Element("a", [("x", "1"), ("y", "&amp;")])

        assert element.get_attribute("y") == "&amp;"
        assert element.get_attribute("z", "none") == "none"
        assert element.has_attribute("x")
        assert not element.has_attribute("z")

    def test_find(self):
        """Test descendant search excludes the element itself."""
        root = _sample_document().root

        assert root.find("c").name == "c"
        assert root.find("r") is None
        assert len(root.find_all("a")) == 2

    def test_depth(self):
        """Test subtree height."""
        root = _sample_document().root

        assert Element("leaf").depth() == 0
        assert root.depth() == 3

    def test_deep_chain(self):
        """Test traversal helpers on a chain deeper than the recursion limit."""
        root = Element("e0")
        current = root
        for index in range(1, 5000):
            child = Element(f"e{index}")
            current.children.append(child)
            current = child

        assert root.depth() == 4999
        assert sum(1 for _ in root.iter_elements()) == 5000
        assert root.find("e4999") is current

    def test_to_dict(self):
        """Test dictionary form keeps order and raw values."""
        element = Element("a", [("z", "1"), ("a", "2")], [Text("t"), Element("b")])

        assert element.to_dict() == {
            "name": "a",
            "attributes": [["z", "1"], ["a", "2"]],
            "children": [
                {"text": "t"},
                {"name": "b", "attributes": []},
            ],
        }


class TestDocument:
    """Test document helpers."""

    def test_root_and_counts(self):
        """Test root lookup and aggregate statistics."""
        document = _sample_document()

        assert document.root.name == "r"
        assert document.element_count == 6
        assert document.max_depth == 3
        assert [e.name for e in document.iter_elements()] == ["r", "a", "b", "a", "c", "d"]

    def test_empty_document(self):
        """Test an empty document has no root."""
        document = Document()

        assert document.root is None
        assert document.element_count == 0
        assert document.max_depth == 0
        assert document.to_dict()["root"] is None
