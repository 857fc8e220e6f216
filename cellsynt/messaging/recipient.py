"""
Recipient and Options
=====================
Value objects shared by every message type.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .models import OriginatorType
from .params import clear_empty
from .phone_utils import join_destinations


@dataclass(frozen=True)
class Recipient:
    """
    Destination numbers for a message.

    ``country_code`` is applied to numbers given in local form. When it is
    empty the client's default country code is used instead. Any iterable
    of numbers is accepted and stored as a tuple.
    """
    destinations: Tuple[str, ...] = ()
    country_code: str = ""

    def __post_init__(self):
        object.__setattr__(self, "destinations", tuple(self.destinations))

    def destination(self, default_country_code: str = "") -> str:
        """Destination address(es) formatted for the gateway."""
        return join_destinations(
            self.destinations, self.country_code or default_country_code
        )

    def get_parameters(self, default_country_code: str = "") -> Dict[str, str]:
        # Empty when there is nothing to send to; the client rejects those.
        return clear_empty({"destination": self.destination(default_country_code)})


@dataclass(frozen=True)
class Options:
    """Per-message originator override. Unset fields fall back to the client."""
    originator_type: Optional[OriginatorType] = None
    originator: str = ""

    def get_parameters(self) -> Dict[str, str]:
        return clear_empty({
            "originatortype": self.originator_type.value if self.originator_type else "",
            "originator": self.originator,
        })
