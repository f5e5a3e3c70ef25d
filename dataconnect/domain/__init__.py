"""Domain layer: the connector contract and its error taxonomy.

Nothing here touches a database, the file system or the network.
"""

from .connectors import Connector, DataConnector
from .errors import (
    BackendError,
    ConnectorError,
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
