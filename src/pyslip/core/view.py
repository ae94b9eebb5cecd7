"""Component model: composing views, leaf views and sibling groups."""

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Tuple, Union

from pyslip.core.environment import DISABLED, Environment, EnvironmentKey

if TYPE_CHECKING:
    from bs4.element import Tag


class _Modifiers:
    """Modifiers shared by every component kind."""

    def with_environment(self, key: EnvironmentKey, value: Any) -> "EnvironmentOverride":
        """Render this component with ``key`` overridden for its subtree only."""
        return EnvironmentOverride(self, {key: value})  # type: ignore[arg-type]

    def disable(self, flag: bool = True) -> "EnvironmentOverride":
        return self.with_environment(DISABLED, flag)


class View(_Modifiers):
    """A composing component.

    Owns no markup of its own. ``body`` is evaluated fresh on every render, so
    implementations must be free of side effects.

    Usage:
        class PlanPicker(View):
            @property
            def body(self):
                return Form([Radio(name="plan", value="basic"), ...])
    """

    @property
    def body(self) -> "Component":
        raise NotImplementedError(f"{type(self).__name__} must define 'body'")

    def resolve_environment(self, base: Environment) -> Environment:
        """Environment for this view's subtree. Defaults to ``base`` unchanged."""
        return base


class LeafView(_Modifiers):
    """A terminal component that appends exactly one node to its parent."""

    def render(self, parent: "Tag", environment: Environment) -> None:
        raise NotImplementedError(f"{type(self).__name__} must define 'render'")


class Group(_Modifiers):
    """Ordered siblings rendered against the same parent and environment."""

    __slots__ = ("children",)

    def __init__(self, *children: "Component"):
        self.children: Tuple["Component", ...] = tuple(children)

    def __iter__(self):
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Group({', '.join(repr(c) for c in self.children)})"


class EnvironmentOverride(View):
    """Wraps ``content`` and overrides environment entries for it alone."""

    def __init__(self, content: "Component", overrides: Mapping[EnvironmentKey, Any]):
        self.content = content
        self.overrides = dict(overrides)

    @property
    def body(self) -> "Component":
        return self.content

    def resolve_environment(self, base: Environment) -> Environment:
        return base.derive(self.overrides)


Component = Union[View, LeafView, Group]


def as_component(value: Union["Component", Iterable["Component"], None]) -> "Component":
    """Coerce a ``body`` result to a component.

    Lists and tuples become a ``Group``; ``None`` becomes an empty ``Group``.
    """
    if value is None:
        return Group()
    if isinstance(value, (list, tuple)):
        return Group(*value)
    return value  # type: ignore[return-value]
