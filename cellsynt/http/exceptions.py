from typing import Any, Optional


class CellsyntError(Exception):
    """Base exception for all client errors."""
    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(CellsyntError):
    """Raised when a message cannot be sent as built (e.g. no destination)."""
    pass


class ConfigurationError(CellsyntError):
    """Raised when required client configuration is missing."""
    pass


class TransportError(CellsyntError):
    """Raised when the POST or reading its response fails."""
    pass


class GatewayError(CellsyntError):
    """Raised when the gateway answers with ``Error: <message>``."""
    pass


class ProtocolError(CellsyntError):
    """Raised when the gateway answer matches no known response shape."""
    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message, details=body)
