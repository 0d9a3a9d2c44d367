"""Common literal values used across post_pages.

These constants keep glob patterns, URL prefixes, and manifest filenames
centralized so the collection loader, renderer, and tests agree on them.
Intended for internal use within the post_pages package.

Examples
--------
>>> from post_pages import _constants
>>> _constants.AUTHOR_HREF_TEMPLATE.format(key="jdoe")
'/authors/jdoe/'
>>> _constants.AUTHORS_META_FILENAME.endswith("-meta.json")
True
"""

DEFAULT_POST_GLOB = "**/*.md"
DEFAULT_PAGE_SIZE = 24
AUTHOR_HREF_TEMPLATE = "/authors/{key}/"
AUTHORS_META_FILENAME = ".post-pages-authors-meta.json"
