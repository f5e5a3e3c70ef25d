"""Connector error taxonomy.

Not-found and no-matches are never errors: fetch() resolves to None and
list() resolves to [].  Everything below is raised from the awaited
coroutine, so callers see every failure through the same channel.

  ConnectorError
    ├── UnimplementedCapabilityError   operation not supported by this connector
    ├── BackendError                   backing store failed (transport, I/O, bad data)
    └── InvalidKeyError                key rejected before touching the store
"""

from __future__ import annotations

from typing import Any


class ConnectorError(Exception):
    """Root of every error raised by a connector in this package."""


class UnimplementedCapabilityError(ConnectorError, NotImplementedError):
    """Raised by the default list/remove/save of the Connector base.

    Also a NotImplementedError so callers that only know the builtin can
    still catch it.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} method has not been implemented.")


class BackendError(ConnectorError):
    """A concrete connector's backing store failed.

    The original exception is kept as __cause__.
    """

    def __init__(self, operation: str, key: Any, detail: str) -> None:
        self.operation = operation
        self.key = key
        super().__init__(f"{operation} failed for key {key!r}: {detail}")


class InvalidKeyError(ConnectorError, ValueError):
    """The key cannot address an entity in this connector."""

    def __init__(self, key: Any, reason: str) -> None:
        self.key = key
        super().__init__(f"Invalid key {key!r}: {reason}")
