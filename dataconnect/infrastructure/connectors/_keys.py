"""Key checks shared by the string-keyed connectors."""

from __future__ import annotations

from dataconnect.domain.errors import InvalidKeyError


def check_key(key: str) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(key, "keys must be strings")
    if not key:
        raise InvalidKeyError(key, "keys must be non-empty")
    return key


def matches(key: str, prefix: str | None) -> bool:
    """None and "" match every key."""
    return not prefix or key.startswith(prefix)


def check_filter(prefix: str | None) -> str | None:
    if prefix is not None and not isinstance(prefix, str):
        raise InvalidKeyError(prefix, "filters must be strings")
    return prefix
