from .mock_server import MockServer, MockResponse

__all__ = [
    "MockServer",
    "MockResponse",
]
