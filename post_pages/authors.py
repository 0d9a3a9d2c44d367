"""Group listed posts by author and paginate every author's posts.

The result is a flat list of :class:`~post_pages.pagination.AuthorPage`
records, one per (author, page) pair, which templates iterate in a single
loop. Nested pagination is not available to templates, so every page of
every author is produced up front.

Unknown author identifiers are reported as a value on
:class:`AuthorPagination` rather than raised, letting callers decide whether
to halt the build (:meth:`AuthorPagination.unwrap`) or print a diagnostic.

Example
-------
>>> from pathlib import Path
>>> from post_pages.authors import paginate_by_author
>>> from post_pages.posts import PostCollection
>>> result = paginate_by_author(PostCollection(Path("content")), {})  # doctest: +SKIP
>>> result.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import operator
import typing as typ

from ._constants import DEFAULT_POST_GLOB
from .pagination import add_pagination
from .posts import is_live_post

if typ.TYPE_CHECKING:
    from .contributors import Contributor
    from .pagination import AuthorPage
    from .posts import Post, PostSource

    Paginator = cabc.Callable[
        [cabc.Sequence[Post], Contributor], cabc.Sequence[AuthorPage]
    ]
    LivenessFilter = cabc.Callable[[Post], bool]

DEFAULT_CONTRIBUTORS_LABEL = "data/contributors.yaml"


@dc.dataclass(frozen=True, slots=True)
class UnknownContributor:
    """An author id referenced by posts but missing from the directory.

    Attributes
    ----------
    key : str
        The unknown author identifier.
    input_paths : tuple[str, ...]
        Source paths of every listed post naming ``key``.
    contributors_label : str
        Where contributors are declared, quoted in the message.
    """

    key: str
    input_paths: tuple[str, ...]
    contributors_label: str = DEFAULT_CONTRIBUTORS_LABEL

    @property
    def message(self) -> str:
        """Human-readable diagnostic naming the id and offending paths."""
        paths = ", ".join(self.input_paths)
        return (
            f"unknown contributor {self.key} [{paths}], "
            f"are they in {self.contributors_label}?"
        )


class UnknownContributorError(ValueError):
    """Raised when posts reference an author missing from the directory."""

    def __init__(self, unknown: UnknownContributor) -> None:
        super().__init__(unknown.message)
        self.unknown = unknown


class AuthorIndex:
    """Posts keyed by author id, remembering first-seen author order.

    Keys are unique; iteration follows the order in which authors were first
    added. Each author's posts keep the order they were added in.
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._posts: dict[str, list[Post]] = {}

    @classmethod
    def from_posts(cls, posts: cabc.Iterable[Post]) -> AuthorIndex:
        """Index ``posts`` under every author they list."""
        index = cls()
        for post in posts:
            for author in post.authors:
                index.add(author, post)
        return index

    def add(self, author: str, post: Post) -> None:
        """Append ``post`` to ``author``'s list, registering new authors."""
        bucket = self._posts.get(author)
        if bucket is None:
            bucket = []
            self._keys.append(author)
            self._posts[author] = bucket
        bucket.append(post)

    def posts_for(self, author: str) -> tuple[Post, ...]:
        """Return ``author``'s posts; raises ``KeyError`` for unknown keys."""
        return tuple(self._posts[author])

    def items(self) -> cabc.Iterator[tuple[str, tuple[Post, ...]]]:
        """Yield ``(author, posts)`` pairs in first-seen order."""
        for key in self._keys:
            yield key, tuple(self._posts[key])

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(tuple(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, author: object) -> bool:
        return author in self._posts


@dc.dataclass(frozen=True, slots=True)
class AuthorPagination:
    """Outcome of :func:`paginate_by_author`.

    Exactly one of ``pages`` (possibly empty) or ``error`` is meaningful:
    when ``error`` is set, ``pages`` is empty.
    """

    pages: tuple[AuthorPage, ...] = ()
    error: UnknownContributor | None = None

    @property
    def ok(self) -> bool:
        """True when every author was found in the directory."""
        return self.error is None

    def unwrap(self) -> list[AuthorPage]:
        """Return the pages or raise :class:`UnknownContributorError`."""
        if self.error is not None:
            raise UnknownContributorError(self.error)
        return list(self.pages)


def sort_newest_first(posts: cabc.Iterable[Post]) -> list[Post]:
    """Order ``posts`` by date, newest first, keeping input order for ties."""
    return sorted(posts, key=operator.attrgetter("date"), reverse=True)


def paginate_by_author(
    collection: PostSource,
    contributors: cabc.Mapping[str, Contributor],
    *,
    is_live: LivenessFilter = is_live_post,
    paginate: Paginator = add_pagination,
    pattern: str = DEFAULT_POST_GLOB,
    contributors_label: str = DEFAULT_CONTRIBUTORS_LABEL,
) -> AuthorPagination:
    """Return every author's posts as a flat list of paginated pages.

    Parameters
    ----------
    collection : PostSource
        Source of posts; queried once with ``pattern``.
    contributors : Mapping[str, Contributor]
        Contributor directory keyed by author id.
    is_live : Callable[[Post], bool], optional
        Predicate selecting publicly listed posts.
    paginate : Callable, optional
        Turns an author's posts and contributor record into page records.
    pattern : str, optional
        Glob passed to ``collection.get_filtered_by_glob``.
    contributors_label : str, optional
        Location of the contributor data quoted in diagnostics.

    Returns
    -------
    AuthorPagination
        Pages ordered by first-seen author (scanning newest posts first),
        then by page index; or the first unknown contributor encountered.
    """
    posts = sort_newest_first(
        post for post in collection.get_filtered_by_glob(pattern) if is_live(post)
    )
    index = AuthorIndex.from_posts(posts)

    pages: list[AuthorPage] = []
    for author, authored in index.items():
        contributor = contributors.get(author)
        if contributor is None:
            unknown = UnknownContributor(
                key=author,
                input_paths=tuple(post.input_path for post in authored),
                contributors_label=contributors_label,
            )
            return AuthorPagination(error=unknown)
        pages.extend(paginate(authored, contributor))
    return AuthorPagination(pages=tuple(pages))


__all__ = [
    "AuthorIndex",
    "AuthorPagination",
    "UnknownContributor",
    "UnknownContributorError",
    "paginate_by_author",
    "sort_newest_first",
]
