from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Union

from pyslip.core.environment import CLASS_PREFIX, Environment
from pyslip.core.view import LeafView
from pyslip.elements.base import ContainerView
from pyslip.runtime.attributes import Attr, Attribute
from pyslip.runtime.markup import append_text

if TYPE_CHECKING:
    from bs4.element import Tag


class Div(ContainerView):
    """Generic block container.

    ``class_name`` may be a string or a sequence of names. When the
    environment carries a ``CLASS_PREFIX``, every name is prefixed with it.
    """

    tag = "div"

    def __init__(
        self,
        content=None,
        id: Optional[str] = None,
        class_name: Union[str, Sequence[str], None] = None,
    ):
        super().__init__(content)
        self.id = id
        if isinstance(class_name, str):
            self.class_names = tuple(class_name.split())
        else:
            self.class_names = tuple(class_name or ())

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        prefix = environment[CLASS_PREFIX] or ""
        classes = " ".join(f"{prefix}{name}" for name in self.class_names)
        return (Attr("id", self.id), Attr("class", classes or None))


class Text(LeafView):
    """A text node. Content is escaped on serialization."""

    def __init__(self, text: str):
        self.text = text

    def render(self, parent: "Tag", environment: Environment) -> None:
        append_text(parent, self.text)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"
