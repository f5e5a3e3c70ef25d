"""Tests for dataconnect/domain/connectors/base.py."""

import asyncio

import pytest

from dataconnect.domain.connectors.base import Connector
from dataconnect.domain.errors import ConnectorError, UnimplementedCapabilityError


class EchoConnector(Connector[dict, dict, str]):
    """Knows one entity, "a"; everything else is absent."""

    async def fetch(self, id):
        if id == "a":
            return {"id": "a", "value": "x"}
        return None


class _FullConnector(Connector[str, str, str]):
    def __init__(self):
        self.items = {}

    async def fetch(self, id):
        return self.items.get(id)

    async def list(self, filter=None):
        return [v for k, v in sorted(self.items.items()) if not filter or k.startswith(filter)]

    async def remove(self, id):
        self.items.pop(id, None)

    async def save(self, id, value):
        self.items[id] = value


# --- abstractness ---

def test_connector_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Connector()  # type: ignore[abstract]


def test_connector_subclass_without_fetch_cannot_be_instantiated():
    class _NoFetch(Connector):
        async def list(self, filter=None): return []

    with pytest.raises(TypeError):
        _NoFetch()  # type: ignore[abstract]


def test_connector_subclass_with_only_fetch_instantiates():
    assert EchoConnector() is not None


# --- fetch ---

async def test_fetch_returns_entity_when_found():
    assert await EchoConnector().fetch("a") == {"id": "a", "value": "x"}


async def test_fetch_returns_none_when_absent():
    assert await EchoConnector().fetch("z") is None


async def test_fetch_missing_id_resolves_without_error():
    assert await _FullConnector().fetch("missing-1") is None


# --- default list / remove / save ---

async def test_default_list_raises_unimplemented():
    with pytest.raises(UnimplementedCapabilityError, match=r"^list method has not been implemented\.$"):
        await EchoConnector().list()


@pytest.mark.parametrize("filter", [None, "", "a", "empty-filter"])
async def test_default_list_raises_for_any_filter(filter):
    with pytest.raises(UnimplementedCapabilityError) as exc_info:
        await EchoConnector().list(filter)
    assert exc_info.value.operation == "list"


@pytest.mark.parametrize("id", ["a", "z", ""])
async def test_default_remove_raises_for_any_id(id):
    with pytest.raises(UnimplementedCapabilityError, match=r"^remove method has not been implemented\.$"):
        await EchoConnector().remove(id)


async def test_default_save_raises_unimplemented():
    with pytest.raises(UnimplementedCapabilityError, match=r"^save method has not been implemented\.$") as exc_info:
        await EchoConnector().save("a", {"id": "a", "value": "y"})
    assert exc_info.value.operation == "save"


def test_default_save_does_not_raise_until_awaited():
    coro = EchoConnector().save("a", {})
    with pytest.raises(UnimplementedCapabilityError):
        asyncio.run(coro)


async def test_unimplemented_error_is_connector_error_and_not_implemented_error():
    with pytest.raises(ConnectorError):
        await EchoConnector().list()
    with pytest.raises(NotImplementedError):
        await EchoConnector().remove("a")


# --- overridden operations ---

async def test_overridden_list_returns_empty_list_when_nothing_matches():
    conn = _FullConnector()
    await conn.save("a", "x")
    assert await conn.list("empty-filter") == []


async def test_overridden_operations_round_trip():
    conn = _FullConnector()
    await conn.save("k1", "v1")
    await conn.save("k2", "v2")
    assert await conn.list("k") == ["v1", "v2"]
    await conn.remove("k1")
    assert await conn.fetch("k1") is None


# --- supports ---

def test_supports_fetch_always():
    assert EchoConnector.supports("fetch") is True


@pytest.mark.parametrize("operation", ["list", "remove", "save"])
def test_supports_is_false_for_default_operations(operation):
    assert EchoConnector.supports(operation) is False


@pytest.mark.parametrize("operation", ["list", "remove", "save"])
def test_supports_is_true_for_overridden_operations(operation):
    assert _FullConnector.supports(operation) is True


def test_supports_rejects_unknown_operation():
    with pytest.raises(ValueError):
        EchoConnector.supports("update")


def test_supports_works_on_instances():
    assert _FullConnector().supports("save") is True
