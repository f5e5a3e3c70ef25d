"""Tests for dataconnect/domain/connectors/interface.py."""

from dataconnect.domain.connectors import Connector, DataConnector
from dataconnect.infrastructure.connectors import InMemoryConnector


class _DuckConnector:
    """Satisfies the capability set without inheriting from Connector."""

    async def fetch(self, id): return None
    async def list(self, filter=None): return []
    async def remove(self, id): return None
    async def save(self, id, value): return None


class _ReadOnly(Connector[str, str, str]):
    async def fetch(self, id): return None


def test_duck_typed_object_satisfies_protocol():
    assert isinstance(_DuckConnector(), DataConnector)


def test_connector_subclass_satisfies_protocol():
    assert isinstance(_ReadOnly(), DataConnector)


def test_in_memory_connector_satisfies_protocol():
    assert isinstance(InMemoryConnector(), DataConnector)


def test_object_missing_save_does_not_satisfy_protocol():
    class _Partial:
        async def fetch(self, id): return None
        async def list(self, filter=None): return []
        async def remove(self, id): return None

    assert not isinstance(_Partial(), DataConnector)


async def _first_or_default(conn: DataConnector, key: str, default):
    value = await conn.fetch(key)
    return default if value is None else value


async def test_generic_consumer_works_against_any_connector():
    assert await _first_or_default(_DuckConnector(), "k", "fallback") == "fallback"
    assert await _first_or_default(InMemoryConnector({"k": "v"}), "k", "fallback") == "v"
