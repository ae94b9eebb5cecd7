"""Markup tree construction and serialization on top of BeautifulSoup.

Only three capabilities are used by the renderer: append a child element,
set an attribute, and serialize. Escaping is left to BeautifulSoup.
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import NavigableString, Tag
from bs4.formatter import HTMLFormatter

from pyslip.core.errors import RenderError


class BooleanAttribute(str):
    """Marks an attribute set by a flag; serialized by name only."""


class OrderedHTMLFormatter(HTMLFormatter):
    """HTML formatter that keeps attributes in insertion order.

    The stock formatters sort attributes alphabetically; emitted order is part
    of the output contract here.
    """

    def attributes(self, tag: Tag) -> List[Tuple[str, Optional[str]]]:
        if tag.attrs is None:
            return []
        return [
            (key, None if isinstance(value, BooleanAttribute) else value)
            for key, value in tag.attrs.items()
        ]


FORMATTER = OrderedHTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=" /",
)


def new_document() -> BeautifulSoup:
    """Return an empty document to render into."""
    return BeautifulSoup("", "html.parser")


def _document_of(node: Tag) -> BeautifulSoup:
    root = node
    while root.parent is not None:
        root = root.parent
    if not isinstance(root, BeautifulSoup):
        raise RenderError(f"<{node.name}> is not attached to a document")
    return root


def append_element(parent: Tag, name: str) -> Tag:
    """Append a new ``<name>`` element to ``parent`` and return it."""
    if not isinstance(parent, Tag):
        raise RenderError(f"Cannot append <{name}> to {type(parent).__name__}")
    if not name:
        raise RenderError("Element name must not be empty")

    element = _document_of(parent).new_tag(name)
    parent.append(element)
    return element


def append_text(parent: Tag, text: str) -> NavigableString:
    if not isinstance(parent, Tag):
        raise RenderError(f"Cannot append text to {type(parent).__name__}")
    node = NavigableString(text)
    parent.append(node)
    return node


def set_attribute(element: Tag, name: str, value: str) -> None:
    """Set ``name="value"`` on ``element``. An empty value keeps its ``=""``."""
    if not isinstance(value, str):
        raise RenderError(
            f"Attribute {name!r} on <{element.name}> must be a string, "
            f"got {type(value).__name__}"
        )
    try:
        element[name] = value
    except (TypeError, ValueError) as e:
        raise RenderError(f"Could not set {name!r} on <{element.name}>: {e}") from e


def set_boolean_attribute(element: Tag, name: str) -> None:
    """Set presence-only attribute ``name`` on ``element``."""
    set_attribute(element, name, BooleanAttribute(""))


def serialize(node: Tag) -> str:
    """Serialize ``node`` (or a whole document) to HTML text."""
    try:
        return node.decode(formatter=FORMATTER)
    except (TypeError, ValueError) as e:
        raise RenderError(f"Could not serialize markup: {e}") from e
