"""Structural connector interface.

DataConnector describes the capability set without requiring inheritance
from Connector.  Consumers annotate against it so any object exposing the
four coroutines can be injected.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)
U = TypeVar("U", contravariant=True)
V = TypeVar("V", contravariant=True)


@runtime_checkable
class DataConnector(Protocol[T, U, V]):
    """fetch / list / remove / save over entity T, payload U and key V.

    isinstance() checks only that the four attributes exist, not their
    signatures.
    """

    async def fetch(self, id: V) -> T | None: ...

    async def list(self, filter: V | None = None) -> list[T]: ...

    async def remove(self, id: V) -> None: ...

    async def save(self, id: V, value: U) -> None: ...
