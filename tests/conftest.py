import pytest

from cellsynt.client import AsyncCellsyntClient, new_client
from cellsynt.testing import MockServer

MOCK_API_URL = "http://mock.cellsynt.net/sms.php"


@pytest.fixture
def server():
    """Mock gateway; fails the test if a queued response was never used."""
    mock = MockServer()
    yield mock
    mock.verify_no_more_requests()


@pytest.fixture
def client(server):
    return new_client(
        "username",
        "password",
        "sendername",
        transport=server.http_transport(),
        api_url=MOCK_API_URL,
    )


@pytest.fixture
def async_client(server, client):
    return AsyncCellsyntClient(client.config, transport=server.async_http_transport())
