"""
Parameter Mappings
==================
Helpers for building, merging and serializing gateway form parameters.

Values are ``str`` except for binary payload fields, which stay ``bytes``
so they reach the wire unchanged.
"""

from typing import Dict, Mapping, Optional, Union

ParamValue = Union[str, bytes]


def clear_empty(params: Mapping[str, Optional[ParamValue]]) -> Dict[str, ParamValue]:
    """Return a copy of ``params`` without empty or unset values."""
    return {key: value for key, value in params.items() if value}


def merge_params(
    primary: Mapping[str, ParamValue],
    secondary: Mapping[str, ParamValue],
) -> Dict[str, ParamValue]:
    """
    Merge two parameter mappings.

    Keys from ``primary`` win; keys only present in ``secondary`` are
    added. Empty values from either side are dropped.

    Args:
        primary: Mapping whose values take priority
        secondary: Mapping supplying values for missing keys

    Returns:
        New merged mapping
    """
    merged = clear_empty(secondary)
    merged.update(clear_empty(primary))
    return merged


def _as_bytes(value: ParamValue) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def form_body(params: Mapping[str, ParamValue]) -> bytes:
    """
    Build the request body posted to the gateway.

    Pairs are sorted by key so that the same logical parameter set always
    produces the same body. ``str`` values are written as UTF-8, ``bytes``
    values as-is. Nothing is escaped here; fields that need escaping are
    escaped when the message builds its parameters.
    """
    return b"&".join(
        _as_bytes(key) + b"=" + _as_bytes(value)
        for key, value in sorted(params.items())
        if value
    )


def serialize_params(params: Mapping[str, ParamValue]) -> str:
    """
    Text form of ``form_body``.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so
    ``serialize_params(p).encode("utf-8", "surrogateescape") == form_body(p)``.
    """
    return form_body(params).decode("utf-8", "surrogateescape")
