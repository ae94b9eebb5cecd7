"""Immutable, inheritable render environment.

An ``Environment`` is a persistent mapping from ``EnvironmentKey`` objects to
values. Deriving a child never touches the parent, so sibling subtrees never
observe each other's overrides:

    base = Environment()
    child = base.derive({DISABLED: True})
    base[DISABLED]   # False
    child[DISABLED]  # True
"""

from types import MappingProxyType
from typing import Any, Dict, Generic, Iterator, Mapping, Optional, TypeVar

T = TypeVar("T")


class EnvironmentKey(Generic[T]):
    """A typed environment entry with a default value.

    Keys compare by identity, so two keys with the same name never collide.
    """

    __slots__ = ("name", "default")

    def __init__(self, name: str, default: T):
        self.name = name
        self.default = default

    def __repr__(self) -> str:
        return f"EnvironmentKey({self.name!r}, default={self.default!r})"


class Environment(Mapping):
    """Read-only context threaded top-down through a render."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[EnvironmentKey, Any]] = None):
        for key in values or {}:
            if not isinstance(key, EnvironmentKey):
                raise TypeError(f"Environment keys must be EnvironmentKey, got {key!r}")
        self._values: Mapping[EnvironmentKey, Any] = MappingProxyType(
            dict(values or {})
        )

    def __getitem__(self, key: EnvironmentKey) -> Any:
        # Every key has a default, so lookups never fail
        return self._values.get(key, key.default)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[EnvironmentKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        entries = ", ".join(f"{k.name}={v!r}" for k, v in self._values.items())
        return f"Environment({entries})"

    def derive(self, overrides: Mapping[EnvironmentKey, Any]) -> "Environment":
        """Return a new environment equal to this one except for ``overrides``."""
        if not overrides:
            return self
        merged: Dict[EnvironmentKey, Any] = dict(self._values)
        merged.update(overrides)
        return Environment(merged)


def derive(base: Environment, overrides: Mapping[EnvironmentKey, Any]) -> Environment:
    return base.derive(overrides)


def lookup(env: Environment, key: EnvironmentKey[T]) -> T:
    return env[key]


# Built-in keys

DISABLED: EnvironmentKey[bool] = EnvironmentKey("disabled", False)
"""Form controls in the subtree render as disabled."""

CLASS_PREFIX: EnvironmentKey[Optional[str]] = EnvironmentKey("class_prefix", None)
"""Prefix applied to class names emitted by container elements."""
