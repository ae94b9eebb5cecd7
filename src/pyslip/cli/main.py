"""Main CLI entry point."""

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from pyslip import __version__
from pyslip.core.errors import PySlipError

console = Console()

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_HEADER = "bold magenta"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'pyslip --help' for more information."

click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "pyslip": [
        {
            "name": "Commands",
            "commands": ["build", "render"],
        }
    ]
}

DISCOVERY_FILES = ("site.py", "main.py", "app.py")
DISCOVERY_NAMES = ("site", "app")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def import_object(target: str) -> Any:
    """Import an object from a 'module:attr' string (e.g. 'site:site')."""
    if ":" not in target:
        raise click.BadParameter("Target must be in format 'module:attr'", param_hint="APP")

    module_name, attr_name = target.split(":", 1)

    # Add current directory to path so we can import local modules
    sys.path.insert(0, os.getcwd())

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Could not import module '{module_name}': {e}", param_hint="APP"
        )

    try:
        return getattr(module, attr_name)
    except AttributeError:
        raise click.BadParameter(
            f"Attribute '{attr_name}' not found in module '{module_name}'",
            param_hint="APP",
        )


def _discover_site_str() -> str:
    """Look for a Site instance in site.py, main.py or app.py (also under src/)."""
    cwd = Path(os.getcwd())

    for path in (cwd, cwd / "src"):
        if not path.exists():
            continue

        for filename in DISCOVERY_FILES:
            if not (path / filename).exists():
                continue

            module_name = filename[:-3]
            module_path = f"src.{module_name}" if path.name == "src" else module_name

            try:
                sys.path.insert(0, str(cwd))
                module = importlib.import_module(module_path)
            except ImportError:
                continue

            for name in DISCOVERY_NAMES:
                if hasattr(module, name):
                    return f"{module_path}:{name}"

    raise click.UsageError(
        "Could not auto-discover site. Please provide 'APP' argument (e.g. 'site:site')."
    )


@click.group(
    help=f"""
[bold white on cyan] pyslip [/] [bold cyan]v{__version__}[/] Compile Python view components to static HTML.

Run [bold cyan]pyslip build APP[/] to render every page and the stylesheet.
Run [bold cyan]pyslip render APP[/] to print the markup of a single view.

[dim]APP should be a string in format 'module:attr', e.g. 'site:site'.
If not provided, pyslip tries to discover it in site.py, main.py, app.py.[/dim]
"""
)
@click.version_option(__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    _configure_logging(verbose)


@cli.command()
@click.argument("app", required=False)
@click.option("--out-dir", default=None, help="Output directory (default: site.out_dir).")
@click.option("--clean", is_flag=True, help="Remove the output directory first.")
def build(app: Optional[str], out_dir: Optional[str], clean: bool) -> None:
    """Build every page of a site and its stylesheet."""
    from pyslip.compiler.build import build_site
    from pyslip.runtime.site import Site

    if not app:
        app = _discover_site_str()

    console.print(f"🔨 Building [cyan]{app}[/]...")

    site = import_object(app)
    if not isinstance(site, Site):
        raise click.BadParameter(
            f"'{app}' is a {type(site).__name__}, expected a Site", param_hint="APP"
        )

    try:
        summary = build_site(site, out_dir=Path(out_dir) if out_dir else None, clean=clean)
    except PySlipError as e:
        raise click.ClickException(str(e))

    console.print(
        "✅ Build complete "
        f"(pages={summary.pages}, styles={summary.styles}, out={summary.out_dir})"
    )


@cli.command()
@click.argument("view")
@click.option("--document", is_flag=True, help="Wrap the markup in a full HTML document.")
@click.option("--title", default="", help="Document title (with --document).")
def render(view: str, document: bool, title: str) -> None:
    """Print the markup for VIEW ('module:attr', a component or a factory)."""
    from pyslip.runtime.document import render_document
    from pyslip.runtime.renderer import render_html
    from pyslip.runtime.site import Page

    target = import_object(view)

    try:
        root = Page(route="/", source=target).resolve()
        html = render_document(root, title=title) if document else render_html(root)
    except PySlipError as e:
        raise click.ClickException(str(e))

    click.echo(html)


if __name__ == "__main__":
    cli()
