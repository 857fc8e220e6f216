"""
Cellsynt SMS Client
===================
Client library for sending SMS through the Cellsynt HTTP gateway.
"""

__version__ = "0.1.0"

# Messages
from cellsynt.messaging import (
    Message,
    TextMessage,
    FlashMessage,
    UnicodeMessage,
    BinaryMessage,
    Recipient,
    Options,
    OriginatorType,
    Charset,
    MessageType,
    build_text_message,
    calculate_segments,
)

# Client
from cellsynt.client import (
    ClientConfig,
    CellsyntClient,
    AsyncCellsyntClient,
    Response,
    new_client,
    parse_response,
)

# Transport & errors
from cellsynt.http import (
    HttpxTransport,
    AsyncHttpxTransport,
    CellsyntError,
    ValidationError,
    ConfigurationError,
    TransportError,
    GatewayError,
    ProtocolError,
)

__all__ = [
    # Messages
    "Message",
    "TextMessage",
    "FlashMessage",
    "UnicodeMessage",
    "BinaryMessage",
    "Recipient",
    "Options",
    "OriginatorType",
    "Charset",
    "MessageType",
    "build_text_message",
    "calculate_segments",
    # Client
    "ClientConfig",
    "CellsyntClient",
    "AsyncCellsyntClient",
    "Response",
    "new_client",
    "parse_response",
    # Transport & errors
    "HttpxTransport",
    "AsyncHttpxTransport",
    "CellsyntError",
    "ValidationError",
    "ConfigurationError",
    "TransportError",
    "GatewayError",
    "ProtocolError",
]
