"""
Unit Tests for the Gateway Client
=================================
Parameter merging, dispatch and logging, run against the mock server.
"""

import httpx
import pytest
from structlog.testing import capture_logs

from cellsynt.client import CellsyntClient, ClientConfig, Response, new_client
from cellsynt.http import (
    GatewayError,
    HttpxTransport,
    ProtocolError,
    TransportError,
    ValidationError,
)
from cellsynt.messaging import (
    BinaryMessage,
    Charset,
    Options,
    OriginatorType,
    Recipient,
    TextMessage,
    UnicodeMessage,
)
from cellsynt.testing import MockResponse

MOCK_API_URL = "http://mock.cellsynt.net/sms.php"

FULL_BODY = (
    "allowconcat=6&charset=UTF-8&destination=0046703112233&originator=test"
    "&originatortype=alpha&password=password&text=test&type=text&username=username"
)


def full_text_message(**kwargs):
    fields = dict(
        recipient=Recipient(destinations=["0046703112233"]),
        text="test",
        charset=Charset.UTF8,
        allow_concat=True,
        options=Options(originator_type=OriginatorType.ALPHA, originator="test"),
    )
    fields.update(kwargs)
    return TextMessage(**fields)


class RecordingLogger:
    def __init__(self):
        self.records = []

    def info(self, event, **fields):
        self.records.append(("info", event, fields))

    def error(self, event, **fields):
        self.records.append(("error", event, fields))


class TestClientParameters:
    """Tests for client defaults and merging."""

    def test_get_parameters(self, client):
        assert client.get_parameters() == {
            "username": "username",
            "password": "password",
            "originatortype": "alpha",
            "originator": "sendername",
            "charset": "UTF-8",
            "allowconcat": "6",
        }

    def test_get_parameters_drops_unset(self):
        client = CellsyntClient(
            ClientConfig(username="u", password="p"),
            transport=HttpxTransport(client=httpx.Client()),
        )

        assert client.get_parameters() == {"username": "u", "password": "p"}

    def test_message_parameters_normal(self, client):
        assert client.message_parameters(full_text_message()) == FULL_BODY

    def test_message_parameters_override(self, client):
        """Message charset wins over the client default."""
        message = full_text_message(charset=Charset.ISO88591)

        assert client.message_parameters(message) == (
            "allowconcat=6&charset=ISO-8859-1&destination=0046703112233&originator=test"
            "&originatortype=alpha&password=password&text=test&type=text&username=username"
        )

    def test_message_parameters_client_defaults_fill_in(self, client):
        message = TextMessage(
            recipient=Recipient(destinations=["0046703112233"]),
            text="test",
        )

        assert client.message_parameters(message) == (
            "allowconcat=6&charset=UTF-8&destination=0046703112233&originator=sendername"
            "&originatortype=alpha&password=password&text=test&type=text&username=username"
        )

    def test_message_parameters_numeric_originator(self, client):
        message = full_text_message(
            options=Options(originator_type=OriginatorType.NUMERIC, originator="46700000000"),
        )

        params = client.message_parameters(message)
        assert "originator=46700000000" in params
        assert "originatortype=numeric" in params
        assert "sendername" not in params

    def test_message_parameters_default_country_code(self, server):
        client = new_client(
            "username",
            "password",
            "sendername",
            transport=server.http_transport(),
            default_country_code="46",
        )
        message = TextMessage(recipient=Recipient(destinations=["0703112233"]), text="test")

        assert "destination=0046703112233" in client.message_parameters(message)

    def test_message_parameters_unicode_text(self, client):
        message = UnicodeMessage(
            recipient=Recipient(destinations=["0046703112233"]),
            text="Ελλάδα",
        )

        assert "text=%CE%95%CE%BB%CE%BB%CE%AC%CE%B4%CE%B1&" in client.message_parameters(message)

    def test_message_not_mutated(self, client):
        message = full_text_message()
        before = message.get_parameters()

        client.message_parameters(message)

        assert message.get_parameters() == before


class TestSendMessage:
    """Tests for dispatching messages."""

    def test_missing_recipient(self, client, server):
        with pytest.raises(ValidationError, match="message has no destination set"):
            client.send_message(TextMessage(text="test"))

        assert server.requests == []

    def test_empty_destinations(self, client, server):
        message = TextMessage(recipient=Recipient(destinations=[]), text="test")

        with pytest.raises(ValidationError, match="message has no destination set"):
            client.send_message(message)

        assert server.requests == []

    def test_normal(self, client, server):
        def check(request, body):
            assert str(request.url) == MOCK_API_URL
            assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
            assert body == FULL_BODY

        server.add_response(MockResponse(
            method="POST",
            code=200,
            body="OK: de8c4a032fb45ae65ab9e349a8dc2458\n",
            check_fn=check,
        ))

        response = client.send_message(full_text_message())

        assert response == Response(
            success=True,
            tracking_ids=["de8c4a032fb45ae65ab9e349a8dc2458"],
        )

    def test_gateway_error(self, client, server):
        """Error bodies fail the send whatever the HTTP status."""
        def check(request, body):
            assert str(request.url) == MOCK_API_URL
            assert body == (
                "allowconcat=6&charset=UTF-8&destination=0046703112233"
                "&originator=sendername&originatortype=alpha&password=password"
                "&text=test&type=text&username=username"
            )

        server.add_response(MockResponse(
            method="POST",
            code=501,
            body="Error: mocked error\n",
            check_fn=check,
        ))
        message = TextMessage(recipient=Recipient(destinations=["0046703112233"]), text="test")

        with pytest.raises(GatewayError) as exc_info:
            client.send_message(message)

        assert str(exc_info.value) == "mocked error"

    def test_ok_with_error_status(self, client, server):
        server.add_response(MockResponse(method="POST", code=500, body="OK: abc"))

        assert client.send_message(full_text_message()).tracking_ids == ["abc"]

    def test_unrecognized_response(self, client, server):
        server.add_response(MockResponse(method="POST", body="<html>maintenance</html>"))

        with pytest.raises(ProtocolError) as exc_info:
            client.send_message(full_text_message())

        assert exc_info.value.body == "<html>maintenance</html>"

    def test_binary_message(self, client, server):
        def check(request, body):
            assert body == (
                "allowconcat=6&charset=UTF-8&data=334455FF&destination=0046703112233"
                "&originator=sendername&originatortype=alpha&password=password"
                "&type=binary&udh=AABBCC001122&username=username"
            )

        server.add_response(MockResponse(method="POST", body="OK: bin1", check_fn=check))
        message = BinaryMessage(
            recipient=Recipient(destinations=["0046703112233"]),
            data=b"334455FF",
            udh=b"AABBCC001122",
        )

        assert client.send_message(message).tracking_ids == ["bin1"]

    def test_binary_payload_bytes_verbatim(self, client, server):
        """Payload bytes 0x80-0xFF reach the wire unchanged."""
        server.add_response(MockResponse(method="POST", body="OK: bin2"))
        message = BinaryMessage(
            recipient=Recipient(destinations=["0046703112233"]),
            data=b"\x01\xff\x80",
            udh=b"\x05\x00",
        )

        client.send_message(message)

        content = server.responses[0].request.content
        assert b"data=\x01\xff\x80&" in content
        assert b"&udh=\x05\x00&" in content
        assert content == client.message_body(message)

    def test_multiple_recipients(self, client, server):
        server.add_response(MockResponse(method="POST", body="OK: a,b"))
        message = TextMessage(
            recipient=Recipient(destinations=["+46703112233", "0703112234"], country_code="46"),
            text="hi",
        )

        response = client.send_message(message)

        assert response.tracking_ids == ["a", "b"]
        assert "destination=0046703112233,0046703112234&" in server.responses[0].request_body

    def test_transport_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = new_client(
            "username",
            "password",
            "sendername",
            transport=HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(refuse))),
        )

        with pytest.raises(TransportError) as exc_info:
            client.send_message(full_text_message())

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_transport_error(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = new_client(
            "username",
            "password",
            "sendername",
            transport=HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(slow))),
        )

        with pytest.raises(TransportError, match="Request timed out"):
            client.send_message(full_text_message())

    def test_invalid_url_is_transport_error(self):
        def unreachable(request):
            raise AssertionError("request should not be sent")

        client = new_client(
            "username",
            "password",
            "sendername",
            transport=HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(unreachable))),
            api_url="http://[::1",
        )

        with pytest.raises(TransportError, match="Invalid URL") as exc_info:
            client.send_message(full_text_message())

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    def test_one_request_per_send(self, client, server):
        server.add_response(MockResponse(method="POST", body="OK: 1"))
        server.add_response(MockResponse(method="POST", body="OK: 2"))

        first = client.send_message(full_text_message())
        second = client.send_message(full_text_message())

        assert first.tracking_ids == ["1"]
        assert second.tracking_ids == ["2"]
        assert len(server.requests) == 2


class TestSendMessageLogging:
    """Tests for the log records written by send_message."""

    def test_logs_success(self, client, server):
        server.add_response(MockResponse(method="POST", body="OK: abc"))

        with capture_logs() as logs:
            client.send_message(full_text_message())

        assert logs == [{
            "event": "sent message",
            "log_level": "info",
            "type": "text",
            "destination": "0046703112233",
            "tracking_ids": ["abc"],
        }]

    def test_logs_gateway_error(self, client, server):
        server.add_response(MockResponse(method="POST", body="Error: invalid originator"))

        with capture_logs() as logs:
            with pytest.raises(GatewayError):
                client.send_message(full_text_message())

        assert logs == [{
            "event": "error sending message",
            "log_level": "error",
            "type": "text",
            "destination": "0046703112233",
            "error": "invalid originator",
        }]

    def test_no_log_on_validation_error(self, client):
        with capture_logs() as logs:
            with pytest.raises(ValidationError):
                client.send_message(TextMessage(text="test"))

        assert logs == []

    def test_injected_logger(self, server):
        log = RecordingLogger()
        client = CellsyntClient(
            ClientConfig(username="u", password="p", api_url=MOCK_API_URL),
            transport=server.http_transport(),
            logger=log,
        )
        server.add_response(MockResponse(method="POST", body="garbage"))

        with pytest.raises(ProtocolError):
            client.send_message(full_text_message())

        assert log.records == [(
            "error",
            "error sending message",
            {
                "type": "text",
                "destination": "0046703112233",
                "error": "response error: garbage",
            },
        )]


class TestNewClient:

    def test_defaults(self):
        client = new_client("u", "p", "Sender")

        assert client.config.originator_type == OriginatorType.ALPHA
        assert client.config.originator == "Sender"
        assert client.config.charset == Charset.UTF8
        assert client.config.allow_concat is True
        client.close()

    def test_overrides(self):
        with new_client("u", "p", "Sender", charset=None, allow_concat=False) as client:
            assert client.config.charset is None
            assert client.get_parameters()["originator"] == "Sender"
            assert "allowconcat" not in client.get_parameters()
