"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object | None, *, base: Path, default: Path) -> Path:
    """Return ``value`` anchored at ``base`` when relative, else ``default`` as is."""
    text = _optional_str(value)
    if not text:
        return default
    path = Path(text)
    if path.is_absolute():
        return path
    return base / path


def _positive_int(value: object | None, *, field: str, default: int) -> int:
    """Coerce ``value`` into an integer of at least one."""
    if value is None:
        return default
    if isinstance(value, bool):
        msg = f"'{field}' must be an integer, got {value!r}."
        raise SiteConfigError(msg)
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        msg = f"'{field}' must be an integer, got {value!r}."
        raise SiteConfigError(msg) from exc
    if number < 1:
        msg = f"'{field}' must be at least 1, got {number}."
        raise SiteConfigError(msg)
    return number


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_optional_str",
    "_parse_timestamp",
    "_positive_int",
    "_resolve_path",
]
