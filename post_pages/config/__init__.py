"""Load and validate the site configuration for author page builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults,
resolves relative paths against the config file location, and returns a
:class:`SiteConfig` that the CLI and renderer consume.

Examples
--------
>>> from pathlib import Path
>>> from post_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.post_glob  # doctest: +SKIP
'**/*.md'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
