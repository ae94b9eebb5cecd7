"""Helpers for build output paths."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path, PurePosixPath

from pyslip.core.errors import ConfigError


def route_to_path(route: str) -> Path:
    """Map a page route to an HTML file path relative to the output directory.

    ``/`` -> ``index.html``, ``/about`` -> ``about.html``,
    ``/docs/`` -> ``docs/index.html``.
    """
    if not route.startswith("/"):
        raise ConfigError(f"Route must start with '/': {route!r}")

    parts = [p for p in PurePosixPath(route).parts if p != "/"]
    if any(p in (".", "..") for p in parts):
        raise ConfigError(f"Route must not contain relative segments: {route!r}")

    if route.endswith("/") or not parts:
        return Path(*parts, "index.html")
    return Path(*parts[:-1], f"{parts[-1]}.html")


def relative_href(target: Path, from_file: Path) -> str:
    """Return a URL path to ``target`` relative to the directory of ``from_file``."""
    rel = os.path.relpath(target, from_file.parent)
    return Path(rel).as_posix()


def write_text_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            delete=False,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as handle:
            temp_name = handle.name
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
        temp_name = None
    finally:
        if temp_name and os.path.exists(temp_name):
            os.remove(temp_name)
