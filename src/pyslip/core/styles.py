from typing import Optional


class StyledComponent:
    """Mixin for components that contribute CSS to the site stylesheet.

    Usage:
        class Card(View, StyledComponent):
            component_css = ".card { padding: 1rem; }"

    ``component_name`` labels the fragment in the generated stylesheet. When a
    class does not set one, it is taken from the class name once, when the
    class is created.
    """

    component_css: str = ""
    component_name: str = "StyledComponent"
    _derived_name: bool = True

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "component_name" in cls.__dict__:
            cls._derived_name = False
        elif cls._derived_name:
            cls.component_name = cls.__name__


class StyleFragment(StyledComponent):
    """A standalone named CSS fragment."""

    def __init__(self, css: str, name: Optional[str] = None):
        self.component_css = css
        if name is not None:
            self.component_name = name

    def __repr__(self) -> str:
        return f"StyleFragment(name={self.component_name!r})"
