"""Stylesheet aggregation: base CSS plus per-component fragments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence, Union

from rich.console import Console
from rich.markup import escape

from pyslip.compiler.paths import write_text_atomic
from pyslip.core.errors import StyleAggregationError

log = logging.getLogger(__name__)
console = Console()

BANNER = "/* Component-specific styles */\n"


def component_name_of(component: Any) -> str:
    name = getattr(component, "component_name", None)
    return name or type(component).__name__


def build_stylesheet(components: Sequence[Any], base_css: str) -> str:
    """Concatenate ``base_css`` and every component's CSS, in input order.

    Fragments are copied verbatim; nothing is parsed or deduplicated.
    """
    parts: List[str] = [base_css, "\n\n", BANNER]
    for component in components:
        name = component_name_of(component)
        log.debug("Adding styles for %s", name)
        parts.append(f"/* {name} */\n")
        parts.append(component.component_css)
        parts.append("\n\n")
    return "".join(parts)


def render_styles(
    components: Iterable[Any],
    base_css: Union[str, Path],
    output: Union[str, Path],
) -> Path:
    """Write the base stylesheet plus component styles to ``output``.

    Args:
        components: Styled component instances, in the order their styles
            should appear.
        base_css: Path of the base stylesheet (UTF-8).
        output: Destination file. Missing parent directories are created.

    Returns:
        The output path.

    Raises:
        StyleAggregationError: The base stylesheet could not be read or the
            output could not be written. No partial output is left behind.
    """
    components = list(components)
    base_path = Path(base_css)

    try:
        with open(base_path, encoding="utf-8", newline="") as handle:
            base_content = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StyleAggregationError(
            f"Could not read base stylesheet {base_path}: {e}", path=base_path
        ) from e

    return write_stylesheet(components, base_content, output)


def write_stylesheet(
    components: Sequence[Any], base_content: str, output: Union[str, Path]
) -> Path:
    """Aggregate ``components`` onto already-loaded base CSS and write ``output``."""
    output_path = Path(output)
    css = build_stylesheet(components, base_content)

    try:
        write_text_atomic(output_path, css)
    except OSError as e:
        raise StyleAggregationError(
            f"Could not write stylesheet {output_path}: {e}", path=output_path
        ) from e

    log.info("Wrote %d component styles to %s", len(components), output_path)
    console.print(
        f"✅ Rendered styles: {len(components)} components → "
        f"[cyan]{escape(output_path.name)}[/]"
    )
    return output_path
