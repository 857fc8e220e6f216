"""
Message Factory
===============
Pick the right text message type for a payload.
"""

from typing import Optional, Sequence

from .encoding import detect_encoding
from .messages import FlashMessage, TextMessage, TextualMessage, UnicodeMessage
from .models import Charset, EncodingType
from .recipient import Options, Recipient


def build_text_message(
    text: str,
    destinations: Sequence[str],
    country_code: str = "",
    options: Optional[Options] = None,
    charset: Optional[Charset] = None,
    allow_concat: bool = False,
    flash: bool = False,
) -> TextualMessage:
    """
    Build a text message, switching to unicode when GSM 03.38 is not enough.

    Args:
        text: Message content
        destinations: Phone numbers to send to
        country_code: Country code for numbers in local form
        options: Optional originator override
        charset: Character set of the text
        allow_concat: Allow the gateway to split into several parts
        flash: Send as a flash message (GSM text only)

    Returns:
        TextMessage, FlashMessage or UnicodeMessage
    """
    recipient = Recipient(destinations=list(destinations), country_code=country_code)

    if detect_encoding(text) == EncodingType.UCS2:
        cls = UnicodeMessage
    elif flash:
        cls = FlashMessage
    else:
        cls = TextMessage

    return cls(
        recipient=recipient,
        options=options,
        text=text,
        charset=charset,
        allow_concat=allow_concat,
    )
