from pyslip.elements.base import ContainerView, ElementView
from pyslip.elements.containers import Div, Text
from pyslip.elements.forms import Checkbox, Form, Label, Radio, TextField

__all__ = [
    "ElementView",
    "ContainerView",
    "Div",
    "Text",
    "Checkbox",
    "Form",
    "Label",
    "Radio",
    "TextField",
]
