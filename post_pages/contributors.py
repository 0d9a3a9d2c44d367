"""Contributor directory loaded from the site's YAML data file.

The directory maps author identifiers used in post front matter to public
profile metadata. Records accept either a plain ``name`` string or a
``{given, family}`` mapping, and every contributor gets a canonical
``/authors/<id>/`` listing URL unless the data file overrides it.

Example
-------
>>> from pathlib import Path
>>> from post_pages.contributors import load_contributors
>>> directory = load_contributors(Path("data/contributors.yaml"))  # doctest: +SKIP
>>> directory["jdoe"].title  # doctest: +SKIP
'Jane Doe'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML

from ._constants import AUTHOR_HREF_TEMPLATE
from .config.helpers import _optional_str

if typ.TYPE_CHECKING:
    from pathlib import Path


class ContributorConfigError(ValueError):
    """Raised when the contributors data file is malformed."""


@dc.dataclass(frozen=True, slots=True)
class Contributor:
    """Public profile metadata for one author.

    Attributes
    ----------
    key : str
        Identifier referenced from post front matter.
    title : str
        Display name.
    href : str
        Site-relative URL of the author's listing.
    description : str
        Short bio in Markdown.
    image : str | None
        Optional avatar path.
    """

    key: str
    title: str
    href: str
    description: str = ""
    image: str | None = None


def _display_name(key: str, name: object | None) -> str:
    match name:
        case str():
            return name.strip() or key
        case dict():
            parts = [
                _optional_str(name.get("given")),
                _optional_str(name.get("family")),
            ]
            joined = " ".join(part for part in parts if part)
            return joined or key
        case None:
            return key
        case _:
            msg = f"Contributor '{key}' has an invalid name: {name!r}"
            raise ContributorConfigError(msg)


def build_contributor(key: str, payload: typ.Mapping[str, typ.Any]) -> Contributor:
    """Build a :class:`Contributor` from one data file entry."""
    title = _optional_str(payload.get("title")) or _display_name(
        key, payload.get("name")
    )
    return Contributor(
        key=key,
        title=title,
        href=_optional_str(payload.get("href"))
        or AUTHOR_HREF_TEMPLATE.format(key=key),
        description=_optional_str(payload.get("description")) or "",
        image=_optional_str(payload.get("image")),
    )


def load_contributors(path: Path) -> dict[str, Contributor]:
    """Load the contributor directory from a YAML mapping of id to record.

    Parameters
    ----------
    path : Path
        Location of the contributors data file.

    Returns
    -------
    dict[str, Contributor]
        Contributors keyed by author identifier, in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ContributorConfigError
        If the file is not a mapping, an entry is not a mapping, or two
        contributors share an ``href``.
    """
    if not path.exists():
        msg = f"Contributors file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Contributors file '{path}' must contain a mapping."
        raise ContributorConfigError(msg)

    directory: dict[str, Contributor] = {}
    owners: dict[str, str] = {}
    for raw_key, payload in loaded.items():
        key = str(raw_key)
        match payload:
            case dict():
                contributor = build_contributor(key, payload)
            case None:
                contributor = build_contributor(key, {})
            case _:
                msg = f"Contributor '{key}' must be a mapping, got {payload!r}"
                raise ContributorConfigError(msg)
        # Listing pages are written beneath href; it must stay unique.
        if contributor.href in owners:
            msg = (
                f"Contributors '{owners[contributor.href]}' and '{key}' "
                f"share the href '{contributor.href}'"
            )
            raise ContributorConfigError(msg)
        owners[contributor.href] = key
        directory[key] = contributor
    return directory


__all__ = [
    "Contributor",
    "ContributorConfigError",
    "build_contributor",
    "load_contributors",
]
