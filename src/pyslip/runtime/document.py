from typing import Any, Dict, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from pyslip.core.environment import Environment as RenderEnvironment
from pyslip.core.view import Component
from pyslip.runtime.renderer import render_html

# Templating environment for the page shell
_env = Environment(
    loader=PackageLoader("pyslip", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Args:
        template_name: Name of the template relative to src/pyslip/templates/
        context: Dictionary of variables to pass to the template

    Returns:
        Rendered HTML string
    """
    template = _env.get_template(template_name)
    return template.render(**context)


def render_document(
    root: Component,
    title: str = "",
    stylesheet: Optional[str] = None,
    lang: str = "en",
    environment: Optional[RenderEnvironment] = None,
) -> str:
    """Render ``root`` as the body of a complete HTML document."""
    body = render_html(root, environment)
    return render_template(
        "document.html",
        {
            "title": title,
            "lang": lang,
            "stylesheet": stylesheet,
            "body": Markup(body),
        },
    )
