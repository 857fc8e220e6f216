"""
Message Segmentation
====================
SMS part counting for text payloads.
"""

from typing import Tuple

from .models import EncodingType
from .encoding import detect_encoding, count_gsm7_characters

GSM7_SINGLE_LIMIT = 160
GSM7_PART_LIMIT = 153
UCS2_SINGLE_LIMIT = 70
UCS2_PART_LIMIT = 67


def calculate_segments(text: str) -> Tuple[int, EncodingType, int]:
    """
    Calculate the number of SMS parts required.

    Part limits:
    - GSM-7: 160 chars (single), 153 chars (concatenated)
    - UCS-2: 70 chars (single), 67 chars (concatenated)

    Args:
        text: Message content

    Returns:
        Tuple of (segments, encoding, char_count)
    """
    encoding = detect_encoding(text)

    if encoding == EncodingType.GSM7:
        char_count = count_gsm7_characters(text)
        single, part = GSM7_SINGLE_LIMIT, GSM7_PART_LIMIT
    else:
        char_count = len(text)
        single, part = UCS2_SINGLE_LIMIT, UCS2_PART_LIMIT

    if char_count <= single:
        return 1, encoding, char_count
    return (char_count + part - 1) // part, encoding, char_count
