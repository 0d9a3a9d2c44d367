"""Unit tests for chunking posts into author page records."""

from __future__ import annotations

import datetime as dt

import pytest

from post_pages.contributors import build_contributor
from post_pages.pagination import AuthorPage, add_pagination
from post_pages.posts import Post


def _posts(count: int) -> list[Post]:
    return [
        Post(
            input_path=f"./content/p{number}.md",
            date=dt.datetime(2024, 2, number, tzinfo=dt.UTC),
        )
        for number in range(1, count + 1)
    ]


def test_chunks_items_and_copies_owner_metadata() -> None:
    """Each page carries the owner metadata plus its slice of posts."""
    owner = build_contributor("jdoe", {"name": "Jane Doe", "description": "Bio"})
    posts = _posts(5)

    pages = add_pagination(posts, owner, page_size=2)

    assert [len(page.elements) for page in pages] == [2, 2, 1]
    assert [page.index for page in pages] == [0, 1, 2]
    assert {page.pages for page in pages} == {3}
    assert pages[2].elements == (posts[4],)
    assert all(page.title == "Jane Doe" for page in pages)
    assert all(page.href == "/authors/jdoe/" for page in pages)
    assert all(page.description == "Bio" for page in pages)


def test_exact_multiple_has_no_trailing_empty_page() -> None:
    """A post count divisible by the page size adds no empty page."""
    owner = build_contributor("jdoe", {})
    assert len(add_pagination(_posts(4), owner, page_size=2)) == 2


def test_empty_items_produce_no_pages() -> None:
    """Nothing to paginate means no pages."""
    assert add_pagination([], build_contributor("jdoe", {})) == []


def test_default_page_size_fits_small_lists() -> None:
    """With the default size a short list fits on a single page."""
    pages = add_pagination(_posts(3), build_contributor("jdoe", {}))
    assert len(pages) == 1
    assert pages[0].pages == 1


def test_rejects_non_positive_page_size() -> None:
    """Page sizes below one are refused."""
    with pytest.raises(ValueError, match="page_size must be at least 1"):
        add_pagination(_posts(1), build_contributor("jdoe", {}), page_size=0)


@pytest.mark.parametrize(
    ("href", "index", "expected"),
    [
        ("/authors/jdoe/", 0, "/authors/jdoe/"),
        ("/authors/jdoe/", 1, "/authors/jdoe/2/"),
        ("/authors/jdoe", 2, "/authors/jdoe/3/"),
    ],
)
def test_page_href(href: str, index: int, expected: str) -> None:
    """The first page lives at the owner href, later pages beneath it."""
    page = AuthorPage(
        title="Jane", href=href, description="", elements=(), index=index, pages=3
    )
    assert page.page_href == expected
