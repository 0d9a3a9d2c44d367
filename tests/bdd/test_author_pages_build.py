"""Behaviour tests for the end-to-end author page build.

The scenario in ``features/author_pages_build.feature`` lays out a site in a
temporary directory, runs the ``generate`` command, and inspects the written
HTML with BeautifulSoup.

Usage:
    pytest tests/bdd/test_author_pages_build.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from post_pages.cli import generate

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "author_pages_build.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a site with five posts by one contributor and a page size of two")
def given_site(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write the config, contributors file, and five dated posts."""
    (tmp_path / "site.yaml").write_text(
        dedent(
            """
            content_dir: content
            contributors: contributors.yaml
            output_dir: public
            page_size: 2
            site_name: Behaviour Blog
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    (tmp_path / "contributors.yaml").write_text(
        "writer:\n  name: Wren Writer\n", encoding="utf-8"
    )
    posts_dir = tmp_path / "content" / "posts"
    posts_dir.mkdir(parents=True)
    for day in range(1, 6):
        (posts_dir / f"day-{day}.md").write_text(
            f"---\ntitle: Day {day}\ndate: 2024-06-0{day}\nauthors: [writer]\n---\n",
            encoding="utf-8",
        )
    scenario_state["root"] = tmp_path


@when("I run the pages generate command")
def when_generate(
    scenario_state: ScenarioState, capsys: pytest.CaptureFixture[str]
) -> None:
    """Invoke the generate command for the scenario's site."""
    root = typ.cast("Path", scenario_state["root"])
    generate(config=root / "site.yaml")
    scenario_state["stdout"] = capsys.readouterr().out


@then("three author pages are written")
def then_three_pages(scenario_state: ScenarioState) -> None:
    """Pages exist at the first, second, and third page URLs."""
    root = typ.cast("Path", scenario_state["root"])
    authors_dir = root / "public" / "authors" / "writer"
    expected = [
        authors_dir / "index.html",
        authors_dir / "2" / "index.html",
        authors_dir / "3" / "index.html",
    ]
    assert all(path.exists() for path in expected), "expected three rendered pages"
    assert scenario_state["stdout"].count("wrote ") == 3


@then("the last page links back to the previous page")
def then_last_page_links_back(scenario_state: ScenarioState) -> None:
    """The final page lists the oldest post and points to page two."""
    root = typ.cast("Path", scenario_state["root"])
    last = root / "public" / "authors" / "writer" / "3" / "index.html"
    soup = BeautifulSoup(last.read_text(encoding="utf-8"), "html.parser")
    titles = [item.a.get_text() for item in soup.select("[data-test='post-item']")]
    assert titles == ["Day 1"]
    prev_link = soup.select_one("[data-test='pager-prev']")
    assert prev_link is not None, "expected a link to the previous page"
    assert prev_link.get("href") == "/authors/writer/2/"
