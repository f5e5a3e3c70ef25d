"""Connector abstractions.

Concrete implementations live in dataconnect/infrastructure/connectors/.
Import from this package rather than individual modules.
"""

from .base import Connector
from .interface import DataConnector

__all__ = [
    "Connector",
    "DataConnector",
]
