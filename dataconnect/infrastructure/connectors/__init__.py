"""Reference connector implementations.

Each one realises the full Connector contract (fetch/list/remove/save)
over string keys, filters list() by key prefix and returns results in key
order.  remove() of a missing key succeeds in all three.
"""

from __future__ import annotations

from .filesystem import JsonFileConnector
from .memory import InMemoryConnector
from .sql import SqlConnector

__all__ = [
    "InMemoryConnector",
    "SqlConnector",
    "JsonFileConnector",
]
