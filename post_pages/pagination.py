"""Split an owner's items into page-sized descriptors.

Listing templates can only loop once, so every page of every author is
flattened into its own :class:`AuthorPage` carrying the owner's metadata
alongside the slice of posts it renders.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import math
import typing as typ

from ._constants import DEFAULT_PAGE_SIZE

if typ.TYPE_CHECKING:
    from .posts import Post


class PageOwner(typ.Protocol):
    """Metadata copied onto every page: a contributor, a tag, and so on."""

    @property
    def title(self) -> str: ...

    @property
    def href(self) -> str: ...

    @property
    def description(self) -> str: ...


@dc.dataclass(frozen=True, slots=True)
class AuthorPage:
    """One page of an author's posts plus pagination metadata.

    Attributes
    ----------
    title : str
        Owner display name.
    href : str
        Owner listing URL (the first page's URL).
    description : str
        Owner description, rendered as Markdown by templates.
    elements : tuple[Post, ...]
        Posts shown on this page.
    index : int
        Zero-based page index.
    pages : int
        Total number of pages for the owner.
    """

    title: str
    href: str
    description: str
    elements: tuple[Post, ...]
    index: int
    pages: int

    @property
    def page_href(self) -> str:
        """Return this page's URL: ``href`` for the first page, else ``href/N/``."""
        if self.index == 0:
            return self.href
        base = self.href if self.href.endswith("/") else f"{self.href}/"
        return f"{base}{self.index + 1}/"


def add_pagination(
    items: cabc.Sequence[Post],
    owner: PageOwner,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[AuthorPage]:
    """Chunk ``items`` into pages of ``page_size`` posts for ``owner``.

    Parameters
    ----------
    items : Sequence[Post]
        Posts in display order.
    owner : PageOwner
        Metadata copied onto every page.
    page_size : int, optional
        Maximum number of posts per page. Defaults to ``DEFAULT_PAGE_SIZE``.

    Returns
    -------
    list[AuthorPage]
        ``ceil(len(items) / page_size)`` pages in order; empty when ``items``
        is empty.

    Raises
    ------
    ValueError
        If ``page_size`` is less than one.
    """
    if page_size < 1:
        msg = f"page_size must be at least 1, got {page_size}"
        raise ValueError(msg)
    pages = math.ceil(len(items) / page_size)
    return [
        AuthorPage(
            title=owner.title,
            href=owner.href,
            description=owner.description,
            elements=tuple(items[index * page_size : (index + 1) * page_size]),
            index=index,
            pages=pages,
        )
        for index in range(pages)
    ]


__all__ = ["AuthorPage", "PageOwner", "add_pagination"]
