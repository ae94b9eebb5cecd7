"""Recursive tree walk from a component tree to a markup tree."""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from pyslip.core.environment import Environment
from pyslip.core.errors import RenderError
from pyslip.core.view import Component, Group, LeafView, View, as_component
from pyslip.runtime.markup import new_document, serialize

log = logging.getLogger(__name__)


def render_view(component: Component, parent: Tag, environment: Environment) -> None:
    """Render ``component`` into ``parent`` depth-first.

    Leaves append their node and end the branch. Composing views append
    nothing; they resolve their subtree environment and recurse into a fresh
    ``body`` against the same parent. Groups render each child in order.
    """
    component = as_component(component)

    if isinstance(component, LeafView):
        log.debug("Rendering %s into <%s>", type(component).__name__, parent.name)
        component.render(parent, environment)
    elif isinstance(component, View):
        subtree_env = component.resolve_environment(environment)
        render_view(component.body, parent, subtree_env)
    elif isinstance(component, Group):
        for child in component.children:
            render_view(child, parent, environment)
    else:
        raise RenderError(f"Cannot render object of type {type(component).__name__}")


def render_tree(
    root: Component, environment: Optional[Environment] = None
) -> BeautifulSoup:
    """Render ``root`` into a new document and return the document."""
    document = new_document()
    render_view(root, document, environment if environment is not None else Environment())
    return document


def render_html(root: Component, environment: Optional[Environment] = None) -> str:
    """Render ``root`` and serialize the result.

    Usage:
        render_html(Radio(name="size", value="large"))
        # '<input type="radio" name="size" value="large" />'
    """
    return serialize(render_tree(root, environment))
