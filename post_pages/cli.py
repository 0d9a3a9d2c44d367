"""Cyclopts CLI entrypoint for building paginated author listings.

The ``pages`` console script defined here loads the site configuration, the
Markdown posts, and the contributor directory, then either renders every
author page (``pages generate``) or only validates that every author named in
front matter has a contributor record (``pages check``). Both commands are
meant to run locally and in CI before a deploy.

Examples
--------
Render author pages for the default configuration:

>>> from post_pages.cli import main
>>> main()  # doctest: +SKIP

Validate contributors for a custom config:

>>> from post_pages.cli import app
>>> app(["check", "--config", "site/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import functools
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .author_pages import AuthorPagesBuilder
from .authors import AuthorPagination, paginate_by_author
from .config import SiteConfig, load_site_config
from .contributors import load_contributors
from .pagination import add_pagination
from .posts import PostCollection, live_posts

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def build_author_pagination(site: SiteConfig) -> AuthorPagination:
    """Load posts and contributors for ``site`` and paginate them by author.

    Parameters
    ----------
    site : SiteConfig
        Resolved configuration naming the content directory, contributors
        file, glob, page size, and draft handling.

    Returns
    -------
    AuthorPagination
        The pages, or the first unknown contributor found.
    """
    collection = PostCollection(site.content_dir)
    contributors = load_contributors(site.contributors_path)
    return paginate_by_author(
        collection,
        contributors,
        is_live=live_posts(include_drafts=site.include_drafts),
        paginate=functools.partial(add_pagination, page_size=site.page_size),
        pattern=site.post_glob,
        contributors_label=_format_path(site.contributors_path),
    )


@app.command(help="Render paginated author listing pages.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    include_drafts: typ.Annotated[
        bool | None,
        Parameter(help="List draft posts too", env_var="INPUT_INCLUDE_DRAFTS"),
    ] = None,
) -> None:
    """Generate every author page for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    include_drafts : bool or None, optional
        Override for the configured draft handling.

    Raises
    ------
    UnknownContributorError
        If any listed post names an author missing from the contributors
        file; the build halts before anything is written.
    """
    site = load_site_config(config)
    if output_dir is not None:
        site.output_dir = output_dir
    if include_drafts is not None:
        site.include_drafts = include_drafts

    pages = build_author_pagination(site).unwrap()
    for path in AuthorPagesBuilder(pages, site).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Check that every post author has a contributor record.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Report the page count per author, or the first unknown contributor.

    Exits with status 1 when an unknown contributor is found.
    """
    site = load_site_config(config)
    result = build_author_pagination(site)
    if result.error is not None:
        print(result.error.message, file=sys.stderr)
        raise SystemExit(1)

    counts: dict[str, tuple[str, int]] = {}
    for page in result.pages:
        counts[page.href] = (page.title, page.pages)
    for title, pages in counts.values():
        label = "page" if pages == 1 else "pages"
        print(f"{title}: {pages} {label}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
