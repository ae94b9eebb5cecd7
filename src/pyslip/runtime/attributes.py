"""Deterministic, order-preserving attribute emission."""

from typing import Iterable, NamedTuple, Optional, Union

from bs4.element import Tag

from pyslip.core.errors import RenderError
from pyslip.runtime.markup import set_attribute, set_boolean_attribute


class Attr(NamedTuple):
    """String attribute, emitted as ``name="value"`` unless ``value`` is None."""

    name: str
    value: Optional[str]


class Flag(NamedTuple):
    """Boolean attribute, emitted by name only when ``enabled``."""

    name: str
    enabled: bool


Attribute = Union[Attr, Flag]


def emit_attributes(element: Tag, attributes: Iterable[Attribute]) -> None:
    """Apply ``attributes`` to ``element`` in the order given.

    Absent values and false flags are skipped. Emitting a name that the
    element already carries is an error; construction is single-pass.
    """
    for attribute in attributes:
        if not isinstance(attribute, (Attr, Flag)):
            raise RenderError(f"Unknown attribute rule: {attribute!r}")
        if attribute.name in element.attrs:
            raise RenderError(
                f"Attribute {attribute.name!r} already set on <{element.name}>"
            )

        if isinstance(attribute, Flag):
            if attribute.enabled:
                set_boolean_attribute(element, attribute.name)
        elif attribute.value is not None:
            set_attribute(element, attribute.name, attribute.value)
