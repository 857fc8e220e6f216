"""
Gateway Responses
=================
Parsing of the gateway's plain text answers.

The gateway answers ``OK: <id>[,<id>...]`` on success and
``Error: <message>`` on failure, regardless of HTTP status.
"""

from dataclasses import dataclass, field
from typing import List

from cellsynt.http.exceptions import GatewayError, ProtocolError

OK_PREFIX = "OK: "
ERROR_PREFIX = "Error: "


@dataclass
class Response:
    """Result of an accepted send. Tracking ids can be used for status lookups."""
    success: bool
    tracking_ids: List[str] = field(default_factory=list)


def parse_response(body: str) -> Response:
    """
    Classify a gateway response body.

    Args:
        body: Raw response text

    Returns:
        Successful Response with the tracking ids in gateway order

    Raises:
        GatewayError: The gateway rejected the message
        ProtocolError: The body is neither an OK nor an Error answer
    """
    if body.startswith(OK_PREFIX):
        ids = body[len(OK_PREFIX):].strip()
        return Response(success=True, tracking_ids=ids.split(","))

    if body.startswith(ERROR_PREFIX):
        raise GatewayError(body[len(ERROR_PREFIX):].strip())

    raise ProtocolError(f"response error: {body}", body=body)
