"""In-process dict-backed connector."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Generic, TypeVar

from dataconnect.domain.connectors.base import Connector
from dataconnect.infrastructure.connectors._keys import check_filter, check_key, matches

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryConnector(Connector[T, T, str], Generic[T]):
    """Stores values as given, keyed by string.

    All operations take the same asyncio.Lock, so calls on one instance
    never interleave.  list() filters by key prefix and returns values in
    key order.  remove() of an unknown key succeeds.
    """

    def __init__(self, items: Mapping[str, T] | None = None) -> None:
        self._items: dict[str, T] = dict(items or {})
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    async def fetch(self, id: str) -> T | None:
        check_key(id)
        async with self._lock:
            value = self._items.get(id)
        if value is None:
            logger.debug("fetch miss: %s", id)
        return value

    async def list(self, filter: str | None = None) -> list[T]:
        check_filter(filter)
        async with self._lock:
            return [self._items[k] for k in sorted(self._items) if matches(k, filter)]

    async def remove(self, id: str) -> None:
        check_key(id)
        async with self._lock:
            self._items.pop(id, None)

    async def save(self, id: str, value: T) -> None:
        check_key(id)
        async with self._lock:
            self._items[id] = value
