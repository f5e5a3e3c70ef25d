"""Async key-addressed data connectors.

The contract lives in dataconnect.domain; reference implementations in
dataconnect.infrastructure.connectors.
"""

from dataconnect.domain import (
    BackendError,
    Connector,
    ConnectorError,
    DataConnector,
    InvalidKeyError,
    UnimplementedCapabilityError,
)

__all__ = [
    "Connector",
    "DataConnector",
    "ConnectorError",
    "UnimplementedCapabilityError",
    "BackendError",
    "InvalidKeyError",
]
