"""Tag serialization shared by the formatter and the compressor."""

from xml_tidy.tree.nodes import Element


def quote_attribute(value: str) -> str:
    """Wrap a raw attribute value in double quotes.

    Values come straight from the source, so ``&`` and ``<`` are already
    escaped. Only a ``"`` (possible when the source used single quotes) has to
    be written as a reference.
    """
    return '"' + value.replace('"', "&quot;") + '"'


def start_tag(element: Element, self_closing: bool = False) -> str:
    """Render the start tag of ``element`` with its attributes in source order."""
    attributes = "".join(
        f" {name}={quote_attribute(value)}" for name, value in element.attributes
    )
    return f"<{element.name}{attributes}{'/' if self_closing else ''}>"


def end_tag(element: Element) -> str:
    """Render the end tag of ``element``."""
    return f"</{element.name}>"
