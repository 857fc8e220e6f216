"""
Phone Utilities
===============
Destination number formatting for the gateway.
"""

from typing import Iterable


def normalize_destination(phone: str, country_code: str = "") -> str:
    """
    Format a phone number as an international ``00`` prefixed number.

    Rules:
    - ``+46...`` becomes ``0046...``
    - ``00...`` is passed through unchanged
    - anything else gets ``00`` + country code, leading zeros stripped

    Args:
        phone: Raw phone number
        country_code: Country code (without + or 00) for local numbers

    Returns:
        Gateway formatted number
    """
    if phone.startswith("+"):
        return "00" + phone[1:]
    if phone.startswith("00"):
        return phone
    return "00" + country_code + phone.lstrip("0")


def join_destinations(phones: Iterable[str], country_code: str = "") -> str:
    """Normalize every number and join them with commas."""
    return ",".join(normalize_destination(phone, country_code) for phone in phones)
