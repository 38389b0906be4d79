"""Indented rendering of a document tree.

Rules, applied per element in pre-order:

* no children: ``<name attrs></name>`` on one line, never self-closing
* a single text child: ``<name attrs>TEXT</name>`` with TEXT trimmed
* element children: start tag, each child one level deeper on its own line,
  end tag on its own line at the element's level

Whitespace-only text between elements is dropped. Other text mixed in with
element children is written trimmed right after the preceding markup.
"""

from typing import List, Optional, Tuple, Union

from xml_tidy.render.markup import end_tag, start_tag
from xml_tidy.shared import FormatConfig
from xml_tidy.tree.nodes import Document, Element, Text


class Formatter:
    """Pretty-printer for :class:`Document` trees."""

    def __init__(self, config: Optional[FormatConfig] = None) -> None:
        self.config = config or FormatConfig()
        self._indent_unit = self.config.indent_unit

    def render(self, document: Document) -> str:
        """Render every top-level element of ``document`` in indented form."""
        parts: List[str] = []
        for element in document.elements:
            self._render_element(element, 0, parts)
        return "".join(parts).strip()

    def render_element(self, element: Element, level: int = 0) -> str:
        """Render a single element subtree starting at ``level``."""
        parts: List[str] = []
        self._render_element(element, level, parts)
        return "".join(parts).strip()

    def _render_element(self, element: Element, level: int, parts: List[str]) -> None:
        # Pending work: an (element, level) pair to open, or literal markup.
        stack: List[Union[Tuple[Element, int], str]] = [(element, level)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            current, current_level = item
            indent = self._indent_unit * current_level
            parts.append(f"\n{indent}{start_tag(current)}")

            children = current.significant_children
            if len(children) == 1 and isinstance(children[0], Text):
                parts.append(children[0].stripped + end_tag(current))
            elif children:
                pending: List[Union[Tuple[Element, int], str]] = [
                    (child, current_level + 1) if isinstance(child, Element) else child.stripped
                    for child in children
                ]
                pending.append(f"\n{indent}{end_tag(current)}")
                stack.extend(reversed(pending))
            else:
                parts.append(end_tag(current))
