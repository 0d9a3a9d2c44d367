"""Render paginated author listings to static HTML.

This module turns the flat list of :class:`~post_pages.pagination.AuthorPage`
records produced by :func:`~post_pages.authors.paginate_by_author` into one
``index.html`` per page under the configured output directory, mirroring each
page's URL (``/authors/jdoe/`` and ``/authors/jdoe/2/``). Contributor bios
are rendered from Markdown. After rendering, the builder records the files
it wrote per author in ``.post-pages-authors-meta.json`` so deploy tooling
can tell which listings exist.

>>> from post_pages.author_pages import AuthorPagesBuilder
>>> builder = AuthorPagesBuilder(pages, site)  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/authors/jdoe/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown

from ._constants import AUTHORS_META_FILENAME

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SiteConfig
    from .pagination import AuthorPage


class AuthorPagesBuilder:
    """Render every author page and the manifest describing them."""

    def __init__(
        self,
        pages: cabc.Sequence[AuthorPage],
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        pages : Sequence[AuthorPage]
            Pages in output order, as returned by ``paginate_by_author``.
        site : SiteConfig
            Resolved site configuration supplying the output directory and
            site-wide labels.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``post_pages/templates``.
        """
        self.pages = list(pages)
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("author_page.jinja")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    def run(self) -> list[Path]:
        """Render each page to disk and return the written paths in page order.

        Notes
        -----
        Creates directories under ``site.output_dir`` as needed and rewrites
        the metadata manifest even when ``pages`` is empty, so stale listings
        from a previous build are not reported.
        """
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        manifest: dict[str, list[str]] = {}
        for page in self.pages:
            output_path = self.output_path_for(page)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            context = {
                "site": self.site,
                "page": page,
                "description_html": self._render_description(page.description),
                "previous_href": self._neighbour_href(page, -1),
                "next_href": self._neighbour_href(page, 1),
                "generated_at": generated_at,
            }
            html = self.template.render(**context)
            if not html.endswith("\n"):
                html += "\n"
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
            relative = output_path.relative_to(self.site.output_dir).as_posix()
            manifest.setdefault(page.href, []).append(relative)
        self._write_metadata(manifest)
        return written

    def output_path_for(self, page: AuthorPage) -> Path:
        """Return the ``index.html`` location serving ``page.page_href``."""
        segments = [part for part in page.page_href.split("/") if part]
        return self.site.output_dir.joinpath(*segments, "index.html")

    def _neighbour_href(self, page: AuthorPage, offset: int) -> str | None:
        target = page.index + offset
        if target < 0 or target >= page.pages:
            return None
        return dc.replace(page, index=target).page_href

    def _render_description(self, text: str) -> str:
        normalized = (text or "").strip()
        if not normalized:
            return ""
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html",
        )

    def _write_metadata(self, manifest: dict[str, list[str]]) -> None:
        """Persist the author href to rendered files mapping."""
        self.site.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.site.output_dir / AUTHORS_META_FILENAME
        path.write_text(json.dumps({"authors": manifest}), encoding="utf-8")


__all__ = ["AuthorPagesBuilder"]
