from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyslip")
except PackageNotFoundError:
    __version__ = "unknown"

from pyslip.core.environment import (
    CLASS_PREFIX,
    DISABLED,
    Environment,
    EnvironmentKey,
    derive,
    lookup,
)
from pyslip.core.errors import (
    ConfigError,
    PySlipError,
    RenderError,
    StyleAggregationError,
)
from pyslip.core.styles import StyledComponent, StyleFragment
from pyslip.core.view import EnvironmentOverride, Group, LeafView, View
from pyslip.compiler.build import build_site
from pyslip.compiler.styles import render_styles
from pyslip.runtime.document import render_document
from pyslip.runtime.renderer import render_html, render_tree, render_view
from pyslip.runtime.site import Site

__all__ = [
    "View",
    "LeafView",
    "Group",
    "EnvironmentOverride",
    "Environment",
    "EnvironmentKey",
    "derive",
    "lookup",
    "DISABLED",
    "CLASS_PREFIX",
    "StyledComponent",
    "StyleFragment",
    "render_view",
    "render_tree",
    "render_html",
    "render_document",
    "render_styles",
    "build_site",
    "Site",
    "PySlipError",
    "RenderError",
    "StyleAggregationError",
    "ConfigError",
]
