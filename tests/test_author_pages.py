"""Rendering tests for the author listing pages.

These tests feed hand-built :class:`AuthorPage` records into
:class:`post_pages.author_pages.AuthorPagesBuilder` and inspect the written
HTML with BeautifulSoup and the metadata manifest with msgspec.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from post_pages._constants import AUTHORS_META_FILENAME
from post_pages.author_pages import AuthorPagesBuilder
from post_pages.config import SiteConfig
from post_pages.contributors import build_contributor
from post_pages.pagination import add_pagination
from post_pages.posts import Post


@pytest.fixture
def site(tmp_path: Path) -> SiteConfig:
    """Return a site config writing into a temporary output directory."""
    return SiteConfig(output_dir=tmp_path / "public", site_name="Example Blog")


def _posts(count: int) -> list[Post]:
    return [
        Post(
            input_path=f"./content/p{number}.md",
            date=dt.datetime(2024, 4, number, tzinfo=dt.UTC),
            title=f"Post <{number}>",
            url=f"/blog/p{number}/",
        )
        for number in range(count, 0, -1)
    ]


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_renders_every_page_at_its_url(site: SiteConfig) -> None:
    """Each page lands in ``<href>/index.html`` with the pager wired up."""
    owner = build_contributor(
        "jdoe", {"name": "Jane Doe", "description": "Writes about *caching*."}
    )
    pages = add_pagination(_posts(3), owner, page_size=2)

    written = AuthorPagesBuilder(pages, site).run()

    assert written == [
        site.output_dir / "authors" / "jdoe" / "index.html",
        site.output_dir / "authors" / "jdoe" / "2" / "index.html",
    ]
    first = _soup(written[0])
    assert first.select_one("[data-test='author-title']").get_text() == "Jane Doe"
    bio = first.select_one("[data-test='author-bio']")
    assert bio is not None, "expected contributor bio to be rendered"
    assert bio.select_one("em").get_text() == "caching"
    items = [item.a.get_text() for item in first.select("[data-test='post-item']")]
    assert items == ["Post <3>", "Post <2>"], "expected titles escaped, newest first"
    assert first.select_one("[data-test='pager-prev']") is None
    assert first.select_one("[data-test='pager-next']")["href"] == "/authors/jdoe/2/"
    assert (
        first.select_one("[data-test='pager-status']").get_text() == "Page 1 of 2"
    )
    assert "Example Blog" in first.title.get_text()

    second = _soup(written[1])
    assert second.select_one("[data-test='pager-prev']")["href"] == "/authors/jdoe/"
    assert second.select_one("[data-test='pager-next']") is None
    assert [a["href"] for a in second.select("[data-test='post-item'] a")] == [
        "/blog/p1/"
    ]


def test_single_page_has_no_pager(site: SiteConfig) -> None:
    """Authors with one page get no pagination controls."""
    pages = add_pagination(_posts(1), build_contributor("solo", {}))
    (path,) = AuthorPagesBuilder(pages, site).run()
    soup = _soup(path)
    assert soup.select_one("[data-test='pager']") is None
    assert soup.select_one("[data-test='author-bio']") is None


def test_manifest_lists_files_per_author(site: SiteConfig) -> None:
    """The metadata manifest maps author hrefs to rendered files."""
    pages = [
        *add_pagination(_posts(3), build_contributor("a", {}), page_size=2),
        *add_pagination(_posts(1), build_contributor("b", {})),
    ]
    AuthorPagesBuilder(pages, site).run()

    manifest = msgspec_json.decode(
        (site.output_dir / AUTHORS_META_FILENAME).read_bytes()
    )
    assert manifest == {
        "authors": {
            "/authors/a/": ["authors/a/index.html", "authors/a/2/index.html"],
            "/authors/b/": ["authors/b/index.html"],
        }
    }


def test_empty_pages_still_write_manifest(site: SiteConfig) -> None:
    """Running with no pages records an empty manifest."""
    assert AuthorPagesBuilder([], site).run() == []
    manifest = msgspec_json.decode(
        (site.output_dir / AUTHORS_META_FILENAME).read_bytes()
    )
    assert manifest == {"authors": {}}
