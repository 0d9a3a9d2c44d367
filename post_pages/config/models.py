"""Typed dataclasses describing post_pages site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from post_pages._constants import DEFAULT_PAGE_SIZE, DEFAULT_POST_GLOB


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved build settings for the author listing pages.

    Attributes
    ----------
    content_dir : Path
        Directory holding the Markdown posts.
    contributors_path : Path
        YAML data file mapping author ids to contributor records.
    output_dir : Path
        Root directory that receives rendered author pages.
    post_glob : str
        Glob, relative to ``content_dir``, selecting the listed posts.
    page_size : int
        Number of posts per author page.
    include_drafts : bool
        List draft posts as well (useful for local previews).
    site_name : str
        Site title shown in rendered pages.
    authors_title_suffix : str
        Suffix appended to author page ``<title>`` elements.
    """

    content_dir: Path = Path("content")
    contributors_path: Path = Path("data/contributors.yaml")
    output_dir: Path = Path("public")
    post_glob: str = DEFAULT_POST_GLOB
    page_size: int = DEFAULT_PAGE_SIZE
    include_drafts: bool = False
    site_name: str = "Blog"
    authors_title_suffix: str = "Authors"


__all__ = ["SiteConfig", "SiteConfigError"]
