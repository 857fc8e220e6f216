from .transport import (
    Transport,
    AsyncTransport,
    HttpxTransport,
    AsyncHttpxTransport,
    DEFAULT_TIMEOUT,
)
from .exceptions import (
    CellsyntError,
    ValidationError,
    ConfigurationError,
    TransportError,
    GatewayError,
    ProtocolError,
)

__all__ = [
    "Transport",
    "AsyncTransport",
    "HttpxTransport",
    "AsyncHttpxTransport",
    "DEFAULT_TIMEOUT",
    "CellsyntError",
    "ValidationError",
    "ConfigurationError",
    "TransportError",
    "GatewayError",
    "ProtocolError",
]
