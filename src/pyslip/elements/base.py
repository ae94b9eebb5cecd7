"""Shared render contract for terminal HTML elements."""

from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Tuple

from pyslip.core.environment import Environment
from pyslip.core.view import Component, LeafView
from pyslip.runtime.attributes import Attr, Attribute, emit_attributes
from pyslip.runtime.markup import append_element
from pyslip.runtime.renderer import render_view

if TYPE_CHECKING:
    from bs4.element import Tag


class ElementView(LeafView):
    """A leaf that appends one ``tag`` element to its parent.

    Subclasses declare ``tag``, any ``fixed_attributes`` (always emitted
    first) and return their configured fields from ``attributes`` in
    declaration order.
    """

    tag: ClassVar[str]
    fixed_attributes: ClassVar[Tuple[Tuple[str, str], ...]] = ()

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        return ()

    def render(self, parent: "Tag", environment: Environment) -> None:
        element = append_element(parent, self.tag)
        emit_attributes(element, [Attr(name, value) for name, value in self.fixed_attributes])
        emit_attributes(element, self.attributes(environment))
        self.render_content(element, environment)

    def render_content(self, element: "Tag", environment: Environment) -> None:
        pass


class ContainerView(ElementView):
    """An element that renders child components inside itself."""

    def __init__(self, content: Optional[Component] = None):
        self.content = content

    def render_content(self, element: "Tag", environment: Environment) -> None:
        if self.content is None:
            return
        render_view(self.content, element, environment)
