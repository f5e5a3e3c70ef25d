"""ORM model registry: importing this package registers every mapper with
Base.metadata before Alembic or SQLAlchemy runs.
"""

from dataconnect.infrastructure.persistence.models.records import ConnectorRecord

__all__ = [
    "ConnectorRecord",
]
