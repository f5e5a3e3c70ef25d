"""Key/value ORM model backing SqlConnector."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from dataconnect.infrastructure.database import Base


class ConnectorRecord(Base):
    """One stored entity.

    (namespace, key) is the primary key, so several connectors can share
    the table without seeing each other's entities.  payload is the JSON
    form of the entity as produced by pydantic's model_dump(mode="json").
    """

    __tablename__ = "connector_records"

    namespace: Mapped[str] = mapped_column(Text, primary_key=True)
    key: Mapped[str] = mapped_column(Text, primary_key=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
