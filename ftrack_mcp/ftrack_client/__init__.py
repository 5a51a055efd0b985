"""ftrack API client, typed operations and errors."""
from . import operations
from .client import FtrackClient
from .errors import (
    ConfigurationError,
    FtrackError,
    OperationError,
    ProtocolError,
    TransportError,
)

__all__ = [
    "FtrackClient",
    "operations",
    "FtrackError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "OperationError",
]
