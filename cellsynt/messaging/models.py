"""
Messaging Models
================
Enumerations and constants shared by every message type.
"""

from enum import Enum


class OriginatorType(str, Enum):
    """How the gateway should interpret the originator field."""
    ALPHA = "alpha"
    NUMERIC = "numeric"


class Charset(str, Enum):
    """Character sets accepted for text payloads.

    Leaving the charset unset (``None``) lets the gateway use its GSM default.
    """
    UTF8 = "UTF-8"
    ISO88591 = "ISO-8859-1"


class MessageType(str, Enum):
    """Type tags sent under the ``type`` parameter."""
    TEXT = "text"
    BINARY = "binary"
    FLASH = "flash"
    UNICODE = "unicode"


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"


# Value the gateway expects for allowconcat; up to six concatenated parts.
ALLOW_CONCAT_TOKEN = "6"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# GSM 03.38 default alphabet
GSM7_BASIC = set(
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# GSM 03.38 extension table (count as 2)
GSM7_EXTENDED = set("€{}\\[~]|^\f")
