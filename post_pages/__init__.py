"""Utilities for generating paginated author listings for a static blog.

This package exposes the CLI entry points used by ``uv run pages`` to group
published posts by author, paginate each author's posts, and render the
resulting listing pages.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``paginate_by_author``: The grouping and pagination transformation.

Examples
--------
>>> from post_pages import app
>>> app(["generate", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .authors import paginate_by_author
from .cli import app, main

__all__ = ["app", "main", "paginate_by_author"]
