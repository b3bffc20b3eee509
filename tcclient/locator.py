"""Locators used to address TeamCity resources inside request URLs."""

from __future__ import annotations

from urllib.parse import quote

# Characters that stay literal when a value is escaped as a URL path segment.
_PATH_SEGMENT_SAFE = "$&+:=@"


def _prefix(kind: str) -> str:
    return quote(f"{kind}:", safe="")


def _path_escape(text: str) -> str:
    return quote(text, safe=_PATH_SEGMENT_SAFE)


def locator_id(id: str) -> str:
    """Locate a project or build type by its id."""
    return _prefix("id") + id


def locator_id_int(id: int) -> str:
    """Locate a resource whose id is an integer."""
    return f"{_prefix('id')}{id:d}"


def locator_name(name: str) -> str:
    """Locate a project or build type by its name."""
    return _prefix("name") + _path_escape(name)


def locator_key(key: str) -> str:
    """Locate a user group by its key."""
    return _prefix("key") + _path_escape(key)


def locator_type(id: str) -> str:
    """Locate a project feature by its type."""
    return _prefix("type") + id