"""
Message Types
=============
The four message types accepted by the gateway.

Each message knows its ``type`` tag and produces only the parameters it has
a value for; the client fills in the rest from its defaults.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Union
from urllib.parse import quote_plus

from .models import ALLOW_CONCAT_TOKEN, Charset, MessageType
from .params import ParamValue, clear_empty, merge_params
from .recipient import Options, Recipient
from .segmentation import calculate_segments


@dataclass(frozen=True)
class Message(ABC):
    """
    Abstract base class for messages.

    Subclasses set ``message_type`` and implement ``_own_parameters``.
    """

    message_type: ClassVar[MessageType]

    recipient: Optional[Recipient] = None
    options: Optional[Options] = None

    def destination(self, default_country_code: str = "") -> str:
        """Formatted destination string, empty when there is no recipient."""
        if self.recipient is None:
            return ""
        return self.recipient.destination(default_country_code)

    @abstractmethod
    def _own_parameters(self) -> Dict[str, ParamValue]:
        """Parameters carried by the message type itself."""

    def get_parameters(self, default_country_code: str = "") -> Dict[str, ParamValue]:
        """
        All non-empty parameters for this message.

        Own fields win over recipient and options fields on collision.

        Args:
            default_country_code: Used when the recipient has none

        Returns:
            Parameter mapping without empty values
        """
        shared: Dict[str, ParamValue] = {}
        if self.recipient is not None:
            shared = merge_params(shared, self.recipient.get_parameters(default_country_code))
        if self.options is not None:
            shared = merge_params(shared, self.options.get_parameters())
        return merge_params(self._own_parameters(), shared)


@dataclass(frozen=True)
class TextualMessage(Message):
    """Base for messages carrying a text payload."""

    text: str = ""
    charset: Optional[Charset] = None
    allow_concat: bool = False

    def _own_parameters(self) -> Dict[str, ParamValue]:
        return clear_empty({
            "type": self.message_type.value,
            "text": quote_plus(self.text),
            "charset": self.charset.value if self.charset else "",
            "allowconcat": ALLOW_CONCAT_TOKEN if self.allow_concat else "",
        })

    @property
    def segments(self) -> int:
        """Number of SMS parts the text needs."""
        segments, _, _ = calculate_segments(self.text)
        return segments


@dataclass(frozen=True)
class TextMessage(TextualMessage):
    """
    A normal text message.

    160 characters per part. Any character in GSM 03.38 can be used; for
    other alphabets use ``UnicodeMessage``.
    """

    message_type: ClassVar[MessageType] = MessageType.TEXT


@dataclass(frozen=True)
class FlashMessage(TextualMessage):
    """
    A text message shown directly on screen instead of saved in the inbox.

    Support varies with phone model and operator network.
    """

    message_type: ClassVar[MessageType] = MessageType.FLASH


@dataclass(frozen=True)
class UnicodeMessage(TextualMessage):
    """
    A text message for characters outside GSM 03.38 (Arabic, Japanese, ...).

    70 characters per part, 67 per part when concatenated. Set ``charset``
    to ``Charset.UTF8`` to send the text as UTF-8.
    """

    message_type: ClassVar[MessageType] = MessageType.UNICODE


@dataclass(frozen=True)
class BinaryMessage(Message):
    """
    Binary payload for settings, bookmarks, visiting cards etc.

    ``data`` and ``udh`` are passed to the gateway verbatim. Either may be
    left empty, but at least one of them should be set.
    """

    message_type: ClassVar[MessageType] = MessageType.BINARY

    data: Union[bytes, str] = b""
    udh: Union[bytes, str] = b""

    def _own_parameters(self) -> Dict[str, ParamValue]:
        return clear_empty({
            "type": self.message_type.value,
            "data": self.data,
            "udh": self.udh,
        })
