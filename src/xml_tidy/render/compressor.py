"""Compact single-line rendering.

Two strategies produce the compact form. ``TREE`` re-serializes the parsed
tree with inter-tag whitespace removed and leaves the inside of text and
attribute values untouched. ``TEXTUAL`` rewrites the validated source text
with whitespace-collapsing substitutions, which also squeezes runs of
whitespace inside text and attribute values down to one space.
"""

import re
from typing import List, Optional, Union

from xml_tidy.render.markup import end_tag, start_tag
from xml_tidy.shared import CompressConfig, CompressStrategy
from xml_tidy.tree.nodes import Document, Element

_BETWEEN_TAGS = re.compile(r">\s+<")
_WHITESPACE_RUN = re.compile(r"\s+")
_AFTER_TAG = re.compile(r">\s+([^<])")
_BEFORE_TAG = re.compile(r"([^>])\s+<")


def collapse_whitespace(content: str) -> str:
    """Apply the textual compaction rewrites to ``content``.

    Examples:
        >>> collapse_whitespace("<r>\\n  <a> x  y </a>\\n</r>")
        '<r><a>x y</a></r>'
    """
    compressed = _BETWEEN_TAGS.sub("><", content)
    compressed = _WHITESPACE_RUN.sub(" ", compressed)
    compressed = _AFTER_TAG.sub(r">\1", compressed)
    compressed = _BEFORE_TAG.sub(r"\1<", compressed)
    return compressed.strip()


class Compressor:
    """Compact renderer for :class:`Document` trees."""

    def __init__(self, config: Optional[CompressConfig] = None) -> None:
        self.config = config or CompressConfig()

    def render(self, document: Document, content: Optional[str] = None) -> str:
        """Render ``document`` on a single line.

        Args:
            document: Parsed document tree
            content: The validated source the tree was built from; required by
                the ``TEXTUAL`` strategy

        Returns:
            Compact markup without declarations
        """
        if self.config.strategy is CompressStrategy.TEXTUAL:
            if content is None:
                raise ValueError("TEXTUAL compression needs the source content")
            return collapse_whitespace(content)

        parts: List[str] = []
        for element in document.elements:
            self._render_element(element, parts)
        return "".join(parts)

    def _render_element(self, element: Element, parts: List[str]) -> None:
        stack: List[Union[Element, str]] = [element]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            children = item.significant_children
            if not children:
                if self.config.self_close_empty:
                    parts.append(start_tag(item, self_closing=True))
                else:
                    parts.append(start_tag(item) + end_tag(item))
                continue

            parts.append(start_tag(item))
            pending: List[Union[Element, str]] = [
                child if isinstance(child, Element) else child.stripped
                for child in children
            ]
            pending.append(end_tag(item))
            stack.extend(reversed(pending))
