"""
Messages and Parameters
=======================
Message types, recipients and the form parameters they produce.
"""

from .models import (
    ALLOW_CONCAT_TOKEN,
    Charset,
    EncodingType,
    GSM7_BASIC,
    GSM7_EXTENDED,
    MessageType,
    OriginatorType,
)
from .params import ParamValue, clear_empty, form_body, merge_params, serialize_params
from .phone_utils import normalize_destination, join_destinations
from .recipient import Recipient, Options
from .messages import (
    Message,
    TextualMessage,
    TextMessage,
    FlashMessage,
    UnicodeMessage,
    BinaryMessage,
)
from .encoding import detect_encoding, count_gsm7_characters
from .segmentation import calculate_segments
from .factory import build_text_message

__all__ = [
    # Models
    "ALLOW_CONCAT_TOKEN",
    "Charset",
    "EncodingType",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    "MessageType",
    "OriginatorType",
    # Params
    "ParamValue",
    "clear_empty",
    "form_body",
    "merge_params",
    "serialize_params",
    # Phone
    "normalize_destination",
    "join_destinations",
    # Value objects
    "Recipient",
    "Options",
    # Messages
    "Message",
    "TextualMessage",
    "TextMessage",
    "FlashMessage",
    "UnicodeMessage",
    "BinaryMessage",
    # Encoding
    "detect_encoding",
    "count_gsm7_characters",
    "calculate_segments",
    "build_text_message",
]
