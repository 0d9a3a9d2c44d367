r"""Load Markdown posts with YAML front matter into immutable records.

This module plays the role of the content collection in the author page
build: it scans a content directory, splits each Markdown file into front
matter and body, and exposes :class:`PostCollection` whose
``get_filtered_by_glob`` mirrors the glob-based retrieval that static site
generators offer to their collection callbacks. The liveness filter that
decides which posts are publicly listed also lives here.

Example
-------
>>> from post_pages.posts import split_front_matter
>>> data, body = split_front_matter("---\ntitle: Hello\n---\nBody\n")
>>> data["title"], body
('Hello', 'Body\n')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import functools
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_POST_GLOB
from .config.helpers import _optional_str, _parse_timestamp

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


class PostParseError(ValueError):
    """Raised when a post's front matter cannot be parsed."""


@dc.dataclass(frozen=True, slots=True)
class Post:
    """A single listed content item.

    Attributes
    ----------
    input_path : str
        Source location, for example ``./content/blog/hello/index.md``.
    date : datetime.datetime
        Timezone-aware (UTC) publish date used for ordering.
    authors : tuple[str, ...]
        Author identifiers in the order given by the front matter.
    title : str
        Post title; falls back to the file stem.
    url : str
        Site-relative URL with a trailing slash.
    draft : bool
        True when the front matter marks the post as a draft.
    data : Mapping[str, Any]
        Remaining front matter, untouched by the author pipeline.
    """

    input_path: str
    date: dt.datetime
    authors: tuple[str, ...] = ()
    title: str = ""
    url: str = "/"
    draft: bool = False
    data: cabc.Mapping[str, typ.Any] = dc.field(
        default_factory=dict, compare=False, hash=False, repr=False
    )


class PostSource(typ.Protocol):
    """Anything that can hand over posts matching a glob pattern."""

    def get_filtered_by_glob(self, pattern: str) -> cabc.Sequence[Post]:
        """Return the posts whose source path matches ``pattern``."""
        ...


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its YAML front matter mapping and Markdown body.

    Text without a leading ``---`` fence has no front matter and is returned
    unchanged as the body.

    Raises
    ------
    YAMLError
        If the fenced block is not valid YAML.
    TypeError
        If the fenced block parses to something other than a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise TypeError(msg)
    return dict(loaded), text[match.end() :]


def _normalize_authors(value: object | None) -> tuple[str, ...]:
    """Return author ids as a tuple of non-empty strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return ()
    authors: list[str] = []
    for entry in value:
        text = _optional_str(entry)
        if text:
            authors.append(text)
    return tuple(authors)


def _url_for(relative: Path) -> str:
    parts = list(relative.parent.parts)
    if relative.stem != "index":
        parts.append(relative.stem)
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


class PostCollection:
    """Markdown posts beneath a content directory, loaded on demand.

    Parameters
    ----------
    content_dir : Path
        Directory scanned for Markdown files.
    root : Path, optional
        Project root used to build ``input_path`` values; defaults to the
        parent of ``content_dir``.
    """

    def __init__(self, content_dir: Path, *, root: Path | None = None) -> None:
        self.content_dir = content_dir
        self.root = root or content_dir.parent
        self._cache: dict[Path, Post] = {}

    def get_filtered_by_glob(self, pattern: str = DEFAULT_POST_GLOB) -> list[Post]:
        """Return posts matching ``pattern`` ordered by date, then by path.

        Parameters
        ----------
        pattern : str
            Glob evaluated relative to ``content_dir``.

        Returns
        -------
        list[Post]
            Matching posts, oldest first. Posts sharing a date are ordered by
            ``input_path``.

        Raises
        ------
        FileNotFoundError
            If ``content_dir`` does not exist.
        PostParseError
            If a matching file carries invalid front matter.
        """
        if not self.content_dir.is_dir():
            msg = f"Content directory '{self.content_dir}' not found."
            raise FileNotFoundError(msg)
        matches = sorted(
            path for path in self.content_dir.glob(pattern) if path.is_file()
        )
        posts = [self._load(path) for path in matches]
        return sorted(posts, key=lambda post: (post.date, post.input_path))

    def _load(self, path: Path) -> Post:
        if path not in self._cache:
            self._cache[path] = self._parse(path)
        return self._cache[path]

    def _parse(self, path: Path) -> Post:
        input_path = self._input_path(path)
        try:
            data, _body = split_front_matter(path.read_text(encoding="utf-8-sig"))
        except (YAMLError, TypeError) as exc:
            msg = f"Invalid front matter in {input_path}: {exc}"
            raise PostParseError(msg) from exc

        date = _parse_timestamp(data.get("date"))
        if date is None:
            date = dt.datetime.fromtimestamp(path.stat().st_mtime, tz=dt.UTC)

        return Post(
            input_path=input_path,
            date=date,
            authors=_normalize_authors(data.get("authors")),
            title=_optional_str(data.get("title")) or path.stem,
            url=_url_for(path.relative_to(self.content_dir)),
            draft=data.get("draft") is True,
            data=data,
        )

    def _input_path(self, path: Path) -> str:
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            return path.as_posix()
        return f"./{relative.as_posix()}"


def is_live_post(
    post: Post, *, now: dt.datetime | None = None, include_drafts: bool = False
) -> bool:
    """Return True when ``post`` should be publicly listed.

    Drafts are hidden unless ``include_drafts`` is set; posts dated after
    ``now`` (default: the current UTC time) are always hidden.
    """
    if post.draft and not include_drafts:
        return False
    current = now or dt.datetime.now(dt.UTC)
    return post.date <= current


def live_posts(
    *, include_drafts: bool = False, now: dt.datetime | None = None
) -> cabc.Callable[[Post], bool]:
    """Return an :func:`is_live_post` predicate bound to the given options."""
    return functools.partial(is_live_post, now=now, include_drafts=include_drafts)


__all__ = [
    "Post",
    "PostCollection",
    "PostParseError",
    "PostSource",
    "is_live_post",
    "live_posts",
    "split_front_matter",
]
