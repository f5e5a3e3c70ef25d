"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration).
"""

from dataconnect.infrastructure.persistence.models import *  # noqa: F401, F403
from dataconnect.infrastructure.persistence.models import __all__ as _orm_all

__all__ = list(_orm_all)
