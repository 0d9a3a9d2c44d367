"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from post_pages._constants import DEFAULT_PAGE_SIZE, DEFAULT_POST_GLOB

from .helpers import _optional_str, _positive_int, _resolve_path
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the author page build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative paths given in the file are resolved
        against the file's parent directory; omitted paths keep their
        working-directory-relative defaults.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping or a value is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from post_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.page_size  # doctest: +SKIP
    24
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = path.parent
    defaults = SiteConfig()

    post_glob = _optional_str(raw.get("post_glob")) or DEFAULT_POST_GLOB
    include_drafts = raw.get("include_drafts", False)
    if not isinstance(include_drafts, bool):
        msg = f"'include_drafts' must be true or false, got {include_drafts!r}."
        raise SiteConfigError(msg)

    return SiteConfig(
        content_dir=_resolve_path(
            raw.get("content_dir"), base=base, default=defaults.content_dir
        ),
        contributors_path=_resolve_path(
            raw.get("contributors"), base=base, default=defaults.contributors_path
        ),
        output_dir=_resolve_path(
            raw.get("output_dir"), base=base, default=defaults.output_dir
        ),
        post_glob=post_glob,
        page_size=_positive_int(
            raw.get("page_size"), field="page_size", default=DEFAULT_PAGE_SIZE
        ),
        include_drafts=include_drafts,
        site_name=_optional_str(raw.get("site_name")) or defaults.site_name,
        authors_title_suffix=_optional_str(raw.get("authors_title_suffix"))
        or defaults.authors_title_suffix,
    )


__all__ = ["load_site_config"]
