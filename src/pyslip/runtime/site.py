"""Site configuration: pages, styled components and output locations."""

import inspect
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from pyslip.core.environment import Environment
from pyslip.core.errors import ConfigError
from pyslip.core.view import Component, Group, LeafView, View, as_component

log = logging.getLogger(__name__)

PROJECT_MARKERS = ("pyproject.toml", "setup.py", ".git")

ViewSource = Union[Component, Callable[[], Component]]


@dataclass
class Page:
    route: str
    source: ViewSource
    title: str = ""

    def resolve(self) -> Component:
        """Return the page's root component, calling a factory if needed."""
        if isinstance(self.source, (View, LeafView, Group)):
            return self.source
        if callable(self.source):
            return as_component(self.source())
        raise ConfigError(
            f"Page {self.route!r} must be a component or a callable returning one"
        )


class Site:
    """A set of pages and styled components built together.

    Usage:
        site = Site(base_css="styles/base.css", styles=[Card()])

        @site.page("/", title="Home")
        def home():
            return HomePage()

    Relative paths resolve against the project root: the nearest directory
    above the caller holding a project marker (pyproject.toml, setup.py or
    .git), or the caller's directory when none is found.
    """

    def __init__(
        self,
        pages: Optional[Dict[str, ViewSource]] = None,
        styles: Optional[Iterable[Any]] = None,
        base_css: Optional[Union[str, Path]] = None,
        out_dir: Optional[Union[str, Path]] = None,
        stylesheet_name: str = "styles.css",
        environment: Optional[Environment] = None,
        project_root: Optional[Union[str, Path]] = None,
    ) -> None:
        if project_root is not None:
            self.project_root = Path(project_root).resolve()
        else:
            self.project_root = self._get_project_root(self._get_caller_dir())

        self.pages: Dict[str, Page] = {}
        for route, source in (pages or {}).items():
            self.add_page(route, source)

        self.styles: List[Any] = list(styles or [])
        self.base_css = self._resolve_base_css(base_css)
        self.out_dir = self._resolve(out_dir) if out_dir else self.project_root / "dist"

        if not stylesheet_name or "/" in stylesheet_name or "\\" in stylesheet_name:
            raise ConfigError(f"Invalid stylesheet name: {stylesheet_name!r}")
        self.stylesheet_name = stylesheet_name
        self.environment = environment if environment is not None else Environment()

    def add_page(self, route: str, source: ViewSource, title: str = "") -> Page:
        if not route.startswith("/"):
            raise ConfigError(f"Route must start with '/': {route!r}")
        if route in self.pages:
            raise ConfigError(f"Duplicate route: {route!r}")
        page = Page(route=route, source=source, title=title)
        self.pages[route] = page
        return page

    def page(self, route: str, title: str = "") -> Callable[[Callable[[], Component]], Callable[[], Component]]:
        """Decorator registering a view factory under ``route``."""

        def decorator(fn: Callable[[], Component]) -> Callable[[], Component]:
            self.add_page(route, fn, title=title)
            return fn

        return decorator

    def add_styles(self, *components: Any) -> None:
        self.styles.extend(components)

    @property
    def stylesheet_path(self) -> Path:
        return self.out_dir / self.stylesheet_name

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if not path.is_absolute():
            path = self.project_root / path
        return path

    def _resolve_base_css(self, base_css: Optional[Union[str, Path]]) -> Optional[Path]:
        if base_css is not None:
            return self._resolve(base_css)

        default = self.project_root / "styles" / "base.css"
        if default.exists():
            log.debug("Using default base stylesheet %s", default)
            return default
        return None

    @staticmethod
    def _get_caller_dir() -> Path:
        # Frame 0 is this function, 1 is __init__, 2 is whoever built the Site
        frame = inspect.stack(context=0)[2]
        return Path(frame.filename).resolve().parent

    @staticmethod
    def _get_project_root(start: Path) -> Path:
        current = start
        while True:
            if any((current / marker).exists() for marker in PROJECT_MARKERS):
                return current
            if current == current.parent:
                return start
            current = current.parent
