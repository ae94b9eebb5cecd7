"""Static site build: one HTML file per page plus the aggregated stylesheet."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pyslip.compiler.paths import relative_href, route_to_path, write_text_atomic
from pyslip.compiler.styles import render_styles, write_stylesheet
from pyslip.runtime.document import render_document

if TYPE_CHECKING:
    from pyslip.runtime.site import Page, Site

log = logging.getLogger(__name__)


@dataclass
class BuildSummary:
    pages: int
    styles: int
    out_dir: Path
    stylesheet: Optional[Path] = None


class SiteBuilder:
    def __init__(self, site: Site, out_dir: Optional[Path] = None) -> None:
        self.site = site
        self.out_dir = (out_dir or site.out_dir).resolve()
        self.stylesheet_path = self.out_dir / site.stylesheet_name

    def build(self, clean: bool = False) -> BuildSummary:
        if clean and self.out_dir.exists():
            log.info("Removing %s", self.out_dir)
            shutil.rmtree(self.out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)

        stylesheet = self._build_stylesheet()

        for page in self.site.pages.values():
            self._build_page(page, stylesheet)

        return BuildSummary(
            pages=len(self.site.pages),
            styles=len(self.site.styles),
            out_dir=self.out_dir,
            stylesheet=stylesheet,
        )

    def _build_stylesheet(self) -> Optional[Path]:
        if self.site.base_css is not None:
            return render_styles(self.site.styles, self.site.base_css, self.stylesheet_path)
        if self.site.styles:
            return write_stylesheet(self.site.styles, "", self.stylesheet_path)
        return None

    def _build_page(self, page: Page, stylesheet: Optional[Path]) -> Path:
        target = self.out_dir / route_to_path(page.route)
        href = relative_href(stylesheet, target) if stylesheet else None

        html = render_document(
            page.resolve(),
            title=page.title,
            stylesheet=href,
            environment=self.site.environment,
        )
        write_text_atomic(target, html)
        log.info("Rendered %s -> %s", page.route, target)
        return target


def build_site(site: Site, out_dir: Optional[Path] = None, clean: bool = False) -> BuildSummary:
    """Build every page of ``site`` and its stylesheet."""
    builder = SiteBuilder(site, out_dir=out_dir)
    return builder.build(clean=clean)
