"""
Gateway Client
==============
Sends messages to the gateway and interprets its answers.
"""

from typing import Any, Dict, Optional

import structlog

from cellsynt.http.exceptions import GatewayError, ProtocolError, ValidationError
from cellsynt.http.transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
)
from cellsynt.messaging.messages import Message
from cellsynt.messaging.models import FORM_CONTENT_TYPE, Charset, OriginatorType
from cellsynt.messaging.params import (
    ParamValue,
    form_body,
    merge_params,
    serialize_params,
)

from .config import ClientConfig
from .response import Response, parse_response


class BaseClient:
    """
    Shared request building and response handling.

    Holds only configuration; every send builds its own parameters, so one
    instance can be shared between threads or tasks.
    """

    def __init__(self, config: ClientConfig, logger: Optional[Any] = None):
        self.config = config
        self.logger = logger or structlog.get_logger(__name__)

    def get_parameters(self) -> Dict[str, str]:
        """Client default parameters."""
        return self.config.get_parameters()

    def _merged_parameters(self, message: Message) -> Dict[str, ParamValue]:
        # Message values take priority; client defaults fill in missing keys.
        return merge_params(
            message.get_parameters(self.config.default_country_code),
            self.get_parameters(),
        )

    def message_body(self, message: Message) -> bytes:
        """Form body posted for ``message``, exactly as sent."""
        return form_body(self._merged_parameters(message))

    def message_parameters(self, message: Message) -> str:
        """Text form of ``message_body``, for logging and inspection."""
        return serialize_params(self._merged_parameters(message))

    def _destination(self, message: Message) -> str:
        destination = message.destination(self.config.default_country_code)
        if not destination:
            raise ValidationError("message has no destination set")
        return destination

    def _handle_response(self, message: Message, destination: str, body: str) -> Response:
        try:
            response = parse_response(body)
        except (GatewayError, ProtocolError) as e:
            self.logger.error(
                "error sending message",
                type=message.message_type.value,
                destination=destination,
                error=e.message,
            )
            raise

        self.logger.info(
            "sent message",
            type=message.message_type.value,
            destination=destination,
            tracking_ids=response.tracking_ids,
        )
        return response


class CellsyntClient(BaseClient):
    """
    Blocking gateway client.

    Usage:
        config = ClientConfig.from_env()
        with CellsyntClient(config) as client:
            response = client.send_message(TextMessage(
                recipient=Recipient(["0703112233"], country_code="46"),
                text="Hello",
            ))
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        logger: Optional[Any] = None,
    ):
        super().__init__(config, logger)
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport(timeout=config.timeout)

    def send_message(self, message: Message) -> Response:
        """
        Dispatch a message to its destination.

        Raises:
            ValidationError: The message has no destination
            TransportError: The request could not be completed
            GatewayError: The gateway rejected the message
            ProtocolError: The gateway answer was not understood
        """
        destination = self._destination(message)
        body = self.transport.post(
            self.config.api_url,
            self.message_body(message),
            FORM_CONTENT_TYPE,
        )
        return self._handle_response(message, destination, body)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncCellsyntClient(BaseClient):
    """Async gateway client, same semantics as CellsyntClient."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[AsyncTransport] = None,
        logger: Optional[Any] = None,
    ):
        super().__init__(config, logger)
        self._owns_transport = transport is None
        self.transport = transport or AsyncHttpxTransport(timeout=config.timeout)

    async def send_message(self, message: Message) -> Response:
        """Dispatch a message to its destination."""
        destination = self._destination(message)
        body = await self.transport.post(
            self.config.api_url,
            self.message_body(message),
            FORM_CONTENT_TYPE,
        )
        return self._handle_response(message, destination, body)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()


def new_client(
    username: str,
    password: str,
    sender_name: str,
    transport: Optional[Transport] = None,
    **overrides: Any,
) -> CellsyntClient:
    """
    Create a client with the usual defaults.

    ``sender_name`` is used as an alphanumeric originator; text is sent as
    UTF-8 with concatenation allowed. Any ClientConfig field can be
    overridden by keyword.
    """
    settings = {
        "originator_type": OriginatorType.ALPHA,
        "originator": sender_name,
        "charset": Charset.UTF8,
        "allow_concat": True,
    }
    settings.update(overrides)
    config = ClientConfig(username=username, password=password, **settings)
    return CellsyntClient(config, transport=transport)
