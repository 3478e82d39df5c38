"""
URI to filesystem-safe subpath.

Turns a URI into a single path segment usable as a cache file or
directory name. The mapping is one-way and not collision free: two URIs
that differ only in escaped characters, or only before the kept tail of a
truncated name, map to the same subpath.
"""

from __future__ import annotations

# Checked in order; the first match is stripped
SCHEME_PREFIXES = ("http://", "https://", "ipfs://")

ESCAPED_CHARACTERS = "/\\#?:.&"

NO_TRUNCATION = 0

_ESCAPE_TABLE = str.maketrans({c: "_" for c in ESCAPED_CHARACTERS})


def strip_scheme(uri: str) -> str:
    """Remove a leading http://, https:// or ipfs:// (case-sensitive)."""
    for prefix in SCHEME_PREFIXES:
        if uri.startswith(prefix):
            return uri[len(prefix):]
    return uri


def uri_to_subpath(uri: str, max_length: int | None = NO_TRUNCATION) -> str:
    """Map a URI to a unique-enough, filesystem-legal name.

    Args:
        uri: Any URI or string.
        max_length: Keep at most this many trailing characters. 0 or None
            disables truncation.

    Returns:
        The sanitized name, e.g. "https://foo.com/x?y#1" -> "foo_com_x_y_1".

    Raises:
        ValueError: If max_length is negative.
    """
    if max_length is not None and max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")

    result = strip_scheme(uri).translate(_ESCAPE_TABLE)

    if max_length and len(result) > max_length:
        result = result[-max_length:]

    return result
