"""Generic connector base.

Connector[T, U, V] is the root abstraction for key-addressed entity access.
Concrete connectors live in dataconnect/infrastructure/connectors/ and are
handed to consumers that only know the four-operation capability set.

Type parameters:
  - T is the entity type returned by fetch() and list().
  - U is the payload accepted by save(); conventionally the same as T, but
    may differ when a backend takes input shaped differently from output.
  - V is the key applied to a request, conventionally a string id or filter.
  Subclasses bind all three explicitly, e.g. Connector[Doc, Doc, str].

Design notes:
  - fetch() is the only abstract method; a subclass that only reads needs
    nothing else.
  - list(), remove() and save() default to raising
    UnimplementedCapabilityError when awaited.  Generic callers can invoke
    any operation uniformly and still fail loudly on an unsupported one.
  - The base holds no state, performs no I/O and gives no ordering
    guarantee between concurrent calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from dataconnect.domain.errors import UnimplementedCapabilityError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_OPTIONAL_OPERATIONS = ("list", "remove", "save")


class Connector(ABC, Generic[T, U, V]):
    """Abstract async data connector with one required operation."""

    @abstractmethod
    async def fetch(self, id: V) -> T | None:
        """Return the entity stored under id, or None if it does not exist.

        Nonexistence is not an error.  Any other failure in retrieving the
        data is raised.
        """

    async def list(self, filter: V | None = None) -> list[T]:
        """Return the entities matching filter.  The list may be empty.

        Always raises unless reimplemented by a subclass whose back-end can
        enumerate resources.
        """
        raise UnimplementedCapabilityError("list")

    async def remove(self, id: V) -> None:
        """Remove the entity stored under id.

        Always raises unless reimplemented by a subclass whose back-end can
        remove resources.
        """
        raise UnimplementedCapabilityError("remove")

    async def save(self, id: V, value: U) -> None:
        """Store value under id.

        Always raises unless reimplemented by a subclass whose back-end can
        save resources.
        """
        raise UnimplementedCapabilityError("save")

    @classmethod
    def supports(cls, operation: str) -> bool:
        """Return True if this connector class provides operation.

        fetch is always supported.  list/remove/save are supported only
        when a subclass overrides the default body.
        """
        if operation == "fetch":
            return True
        if operation not in _OPTIONAL_OPERATIONS:
            raise ValueError(f"Unknown connector operation: {operation!r}")
        return getattr(cls, operation) is not getattr(Connector, operation)
