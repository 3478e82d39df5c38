"""
Narrow (UTF-8 bytes) <-> wide (str / UTF-16) text conversion.

Python's str is the wide representation. encode_wide/decode_wide produce
explicit UTF-16-LE buffers for consumers that want wide characters as
bytes.

Errors:
    errors="strict" (default) raises EncodingError on malformed input.
    errors="replace" substitutes a replacement character instead.
"""

from __future__ import annotations

from typing import Literal

from avpath.exceptions import EncodingError

NARROW_ENCODING = "utf-8"
WIDE_ENCODING = "utf-16-le"

ErrorPolicy = Literal["strict", "replace"]


def _decode(data: bytes | bytearray | memoryview, encoding: str, errors: ErrorPolicy) -> str:
    try:
        return bytes(data).decode(encoding, errors=errors)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"Invalid {encoding} input",
            context={"encoding": encoding, "position": e.start, "reason": e.reason},
        ) from e


def _encode(text: str, encoding: str, errors: ErrorPolicy) -> bytes:
    try:
        return text.encode(encoding, errors=errors)
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"Text cannot be encoded as {encoding}",
            context={"encoding": encoding, "position": e.start, "reason": e.reason},
        ) from e


def to_wide_text(narrow: bytes | bytearray | memoryview | str, errors: ErrorPolicy = "strict") -> str:
    """Decode UTF-8 bytes to str. A str argument is returned unchanged."""
    if isinstance(narrow, str):
        return narrow
    return _decode(narrow, NARROW_ENCODING, errors)


def to_narrow_text(wide: str, errors: ErrorPolicy = "strict") -> bytes:
    """Encode str to UTF-8 bytes.

    Lone surrogates are the only str content UTF-8 cannot represent.
    """
    return _encode(wide, NARROW_ENCODING, errors)


def encode_wide(text: str, errors: ErrorPolicy = "strict") -> bytes:
    """Encode str as UTF-16-LE without a BOM."""
    return _encode(text, WIDE_ENCODING, errors)


def decode_wide(data: bytes | bytearray | memoryview, errors: ErrorPolicy = "strict") -> str:
    """Decode UTF-16-LE bytes (odd lengths and unpaired surrogates are errors)."""
    return _decode(data, WIDE_ENCODING, errors)
