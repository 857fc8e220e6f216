"""
Encoding Detection
==================
Decide whether text fits the GSM 03.38 alphabet.
"""

from .models import EncodingType, GSM7_BASIC, GSM7_EXTENDED

GSM7_ALPHABET = frozenset(GSM7_BASIC | GSM7_EXTENDED)


def detect_encoding(text: str) -> EncodingType:
    """GSM-7 when every character is in the GSM 03.38 tables, UCS-2 otherwise."""
    if set(text) <= GSM7_ALPHABET:
        return EncodingType.GSM7
    return EncodingType.UCS2


def count_gsm7_characters(text: str) -> int:
    """Count GSM-7 character units; extension table characters count as 2."""
    return sum(2 if char in GSM7_EXTENDED else 1 for char in text)
