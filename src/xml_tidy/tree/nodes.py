"""Document tree for the formatting engine.

The tree is a closed sum of two node kinds, :class:`Element` and :class:`Text`.
Renderers dispatch on the concrete type; there is no shared base class.
Attribute values and text are stored exactly as they appear in the source, so
entity and character references survive a format or compress unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

XML_WHITESPACE = " \t\r\n"


@dataclass
class Text:
    """Character data between tags, as written in the source."""

    value: str

    @property
    def is_whitespace(self) -> bool:
        """Check if the text consists only of XML whitespace."""
        return not self.value.strip(XML_WHITESPACE)

    @property
    def stripped(self) -> str:
        """Text with leading and trailing XML whitespace removed."""
        return self.value.strip(XML_WHITESPACE)


@dataclass
class Element:
    """An XML element with ordered attributes and ordered children."""

    name: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate element values."""
        if not self.name:
            raise ValueError("Element name cannot be empty")

    @property
    def element_children(self) -> List["Element"]:
        """Direct children that are elements."""
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def text_children(self) -> List[Text]:
        """Direct children that are text."""
        return [child for child in self.children if isinstance(child, Text)]

    @property
    def significant_children(self) -> List["Node"]:
        """Children with whitespace-only text dropped."""
        return [
            child for child in self.children
            if not (isinstance(child, Text) and child.is_whitespace)
        ]

    @property
    def local_name(self) -> str:
        """Element name without namespace prefix."""
        return self.name.split(":", 1)[-1]

    @property
    def prefix(self) -> Optional[str]:
        """Namespace prefix if present."""
        if ":" in self.name:
            return self.name.split(":", 1)[0]
        return None

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get raw attribute value with optional default."""
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return default

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return any(attr_name == name for attr_name, _ in self.attributes)

    def iter_elements(self) -> Iterator["Element"]:
        """Iterate over this element and all descendants in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.element_children))

    def find(self, name: str) -> Optional["Element"]:
        """Find first descendant element with matching name."""
        for element in self.iter_elements():
            if element is not self and element.name == name:
                return element
        return None

    def find_all(self, name: str) -> List["Element"]:
        """Find all descendant elements with matching name."""
        return [
            element for element in self.iter_elements()
            if element is not self and element.name == name
        ]

    def depth(self) -> int:
        """Height of the subtree rooted here (a leaf has depth 0)."""
        deepest = 0
        stack = [(self, 0)]
        while stack:
            element, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in element.element_children)
        return deepest

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "name": self.name,
            "attributes": [list(pair) for pair in self.attributes],
        }
        if self.children:
            result["children"] = [
                child.to_dict() if isinstance(child, Element) else {"text": child.value}
                for child in self.children
            ]
        return result


Node = Union[Element, Text]


@dataclass
class Document:
    """Top-level node sequence of one parsed content string."""

    children: List[Node] = field(default_factory=list)

    @property
    def root(self) -> Optional[Element]:
        """The document element."""
        for child in self.children:
            if isinstance(child, Element):
                return child
        return None

    @property
    def elements(self) -> List[Element]:
        """Top-level elements; the renderers only emit these."""
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def element_count(self) -> int:
        """Total number of elements in the document."""
        return sum(1 for element in self.elements for _ in element.iter_elements())

    @property
    def max_depth(self) -> int:
        """Deepest element nesting below the root (root only = 0)."""
        return max((element.depth() for element in self.elements), default=0)

    def iter_elements(self) -> Iterator[Element]:
        """Iterate over all elements in document order."""
        for element in self.elements:
            yield from element.iter_elements()

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary representation."""
        root = self.root
        return {
            "element_count": self.element_count,
            "max_depth": self.max_depth,
            "root": root.to_dict() if root is not None else None,
        }
