"""SQLAlchemy connector over the connector_records key/value table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dataconnect.domain.connectors.base import Connector
from dataconnect.domain.errors import BackendError
from dataconnect.infrastructure.connectors._keys import check_filter, check_key
from dataconnect.infrastructure.persistence.models.records import ConnectorRecord

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class SqlConnector(Connector[M, M, str], Generic[M]):
    """Persists pydantic models as JSON rows under one namespace.

    save() also accepts a mapping, validated against the model.

    The connector never commits: writes are flushed into the caller's
    session and become durable when the caller's transaction commits
    (see dataconnect.infrastructure.database.get_session).
    """

    def __init__(self, session: AsyncSession, namespace: str, model: type[M]) -> None:
        self._session = session
        self._namespace = namespace
        self._model = model

    @property
    def namespace(self) -> str:
        return self._namespace

    def _to_domain(self, row: ConnectorRecord, operation: str = "fetch") -> M:
        try:
            return self._model.model_validate(row.payload)
        except ValidationError as exc:
            raise self._backend_error(operation, row.key, exc) from exc

    def _backend_error(self, operation: str, key: Any, exc: Exception) -> BackendError:
        logger.warning(
            "%s failed for %s/%s: %s", operation, self._namespace, key, exc
        )
        return BackendError(operation, key, str(exc))

    async def _get_row(self, key: str) -> ConnectorRecord | None:
        stmt = select(ConnectorRecord).where(
            ConnectorRecord.namespace == self._namespace,
            ConnectorRecord.key == key,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def fetch(self, id: str) -> M | None:
        check_key(id)
        try:
            row = await self._get_row(id)
        except SQLAlchemyError as exc:
            raise self._backend_error("fetch", id, exc) from exc
        if row is None:
            logger.debug("fetch miss: %s/%s", self._namespace, id)
            return None
        return self._to_domain(row)

    async def list(self, filter: str | None = None) -> list[M]:
        check_filter(filter)
        stmt = (
            select(ConnectorRecord)
            .where(ConnectorRecord.namespace == self._namespace)
            .order_by(ConnectorRecord.key)
        )
        if filter:
            stmt = stmt.where(ConnectorRecord.key.startswith(filter, autoescape=True))
        try:
            result = await self._session.execute(stmt)
            rows = list(result.scalars())
        except SQLAlchemyError as exc:
            raise self._backend_error("list", filter, exc) from exc
        return [self._to_domain(row, "list") for row in rows]

    async def save(self, id: str, value: M | Mapping[str, Any]) -> None:
        check_key(id)
        try:
            entity = value if isinstance(value, self._model) else self._model.model_validate(value)
        except ValidationError as exc:
            raise self._backend_error("save", id, exc) from exc
        payload = entity.model_dump(mode="json")
        try:
            row = await self._get_row(id)
            if row is None:
                self._session.add(
                    ConnectorRecord(namespace=self._namespace, key=id, payload=payload)
                )
            else:
                row.payload = payload
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise self._backend_error("save", id, exc) from exc

    async def remove(self, id: str) -> None:
        check_key(id)
        try:
            row = await self._get_row(id)
            if row is not None:
                await self._session.delete(row)
                await self._session.flush()
        except SQLAlchemyError as exc:
            raise self._backend_error("remove", id, exc) from exc
