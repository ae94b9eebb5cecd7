"""Form controls.

Every control appends one ``<input>`` whose ``type`` is always the first
attribute, followed by its configured fields in a fixed order.
"""

from typing import Iterable, Optional

from pyslip.core.environment import DISABLED, Environment
from pyslip.elements.base import ContainerView, ElementView
from pyslip.runtime.attributes import Attr, Attribute, Flag


class Radio(ElementView):
    """A control that selects one option from a mutually exclusive group.

    All radios in a group share the same ``name``.

    Usage:
        Radio(name="size", value="large")
        Radio(name="color", value="red", id="color-red")
        Radio(name="plan", value="premium", id="plan-premium", checked=True)

    Args:
        name: Form control name, as used in form submission.
        value: Value submitted when the radio is selected.
        id: Unique identifier, used for label association.
        checked: Whether the radio is selected by default.
        required: The group must have a selection before submission.
        autofocus: Focus the radio as soon as the page loads.
        disabled: The radio cannot be interacted with. Also set when the
            inherited ``DISABLED`` environment entry is true.
    """

    tag = "input"
    fixed_attributes = (("type", "radio"),)

    def __init__(
        self,
        name: Optional[str] = None,
        value: Optional[str] = None,
        id: Optional[str] = None,
        checked: bool = False,
        required: bool = False,
        autofocus: bool = False,
        disabled: bool = False,
    ):
        self.name = name
        self.value = value
        self.id = id
        self.checked = checked
        self.required = required
        self.autofocus = autofocus
        self.disabled = disabled

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        return (
            Attr("name", self.name),
            Attr("value", self.value),
            Attr("id", self.id),
            Flag("checked", self.checked),
            Flag("required", self.required),
            Flag("autofocus", self.autofocus),
            Flag("disabled", self.disabled or environment[DISABLED]),
        )

    def __repr__(self) -> str:
        return f"Radio(name={self.name!r}, value={self.value!r})"


class Checkbox(Radio):
    """A two-state control. Takes the same fields as ``Radio``."""

    fixed_attributes = (("type", "checkbox"),)

    def __repr__(self) -> str:
        return f"Checkbox(name={self.name!r}, value={self.value!r})"


class TextField(ElementView):
    """Single-line text input."""

    tag = "input"
    fixed_attributes = (("type", "text"),)

    def __init__(
        self,
        name: Optional[str] = None,
        value: Optional[str] = None,
        placeholder: Optional[str] = None,
        id: Optional[str] = None,
        required: bool = False,
        readonly: bool = False,
        autofocus: bool = False,
        disabled: bool = False,
    ):
        self.name = name
        self.value = value
        self.placeholder = placeholder
        self.id = id
        self.required = required
        self.readonly = readonly
        self.autofocus = autofocus
        self.disabled = disabled

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        return (
            Attr("name", self.name),
            Attr("value", self.value),
            Attr("placeholder", self.placeholder),
            Attr("id", self.id),
            Flag("required", self.required),
            Flag("readonly", self.readonly),
            Flag("autofocus", self.autofocus),
            Flag("disabled", self.disabled or environment[DISABLED]),
        )


class Label(ContainerView):
    """Caption for a form control. ``for_`` names the control's ``id``."""

    tag = "label"

    def __init__(self, content=None, for_: Optional[str] = None, id: Optional[str] = None):
        super().__init__(content)
        self.for_ = for_
        self.id = id

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        return (Attr("for", self.for_), Attr("id", self.id))


class Form(ContainerView):
    tag = "form"

    def __init__(
        self,
        content=None,
        action: Optional[str] = None,
        method: Optional[str] = None,
        id: Optional[str] = None,
        novalidate: bool = False,
    ):
        super().__init__(content)
        self.action = action
        self.method = method
        self.id = id
        self.novalidate = novalidate

    def attributes(self, environment: Environment) -> Iterable[Attribute]:
        return (
            Attr("action", self.action),
            Attr("method", self.method),
            Attr("id", self.id),
            Flag("novalidate", self.novalidate),
        )
