"""
Conversion between file:// URIs and filesystem paths.

Conversions work on plain strings and never touch the filesystem. A URI
that cannot be converted yields an empty path (file_uri_to_path) or a
UriPathResult carrying the reason (parse_file_uri); neither raises.

Examples:
    file:///c:/somepath/somefile.ext    <->  c:/somepath/somefile.ext
    file:///home/user/somefile.ext      <->  /home/user/somefile.ext
    file://somehost/somepath/file.ext   <->  //somehost/somepath/file.ext (UNC)
"""

from __future__ import annotations

import os
import re

from avpath.config import get_settings
from avpath.logging import get_logger
from avpath.types import AuthorityStyle, MalformedUriReason, PathParts, UriPathResult

logger = get_logger(__name__)

FILE_URI_PREFIXES = ("file://", "FILE://")
HTTP_URI_PREFIXES = ("http://", "https://")

# Shortest string with anything after "file://"
_MIN_FILE_URI_LENGTH = 8

_DRIVE_RE = re.compile(r"[A-Za-z]:")
_UNC_HOST_RE = re.compile(r"[\\/]{2}[^\\/]+")


def is_file_uri(uri: str) -> bool:
    """True if uri starts with exactly "file://" or "FILE://"."""
    return uri.startswith(FILE_URI_PREFIXES)


def is_http_uri(uri: str) -> bool:
    """True if uri starts with http:// or https:// in any letter case."""
    return uri.lower().startswith(HTTP_URI_PREFIXES)


def default_authority_style() -> AuthorityStyle:
    """Authority style selected by configuration (AVPATH_AUTHORITY_STYLE)."""
    return get_settings().authority_style


def parse_file_uri(uri: str, style: AuthorityStyle | None = None) -> UriPathResult:
    """Convert a file URI to a path, reporting why conversion failed.

    A POSIX path whose first segment looks like a drive does not survive a
    round trip: "/c:/x" becomes "file:///c:/x", which reads back as "c:/x".

    Args:
        uri: URI to convert.
        style: How to read file://host/path. None uses the configured default.

    Returns:
        UriPathResult with the path, or with an empty path and a reason.
    """
    if len(uri) < _MIN_FILE_URI_LENGTH:
        logger.debug("URI too short for a file URI", uri=uri)
        return UriPathResult(uri=uri, reason=MalformedUriReason.TOO_SHORT)

    if not is_file_uri(uri):
        logger.debug("Not a file URI", uri=uri)
        return UriPathResult(uri=uri, reason=MalformedUriReason.WRONG_SCHEME)

    if uri[7] == "/":
        # file:///c:/dir/f.ext -> c:/dir/f.ext, file:///dir/f.ext -> /dir/f.ext
        rest = uri[8:]
        path = rest if _DRIVE_RE.match(rest) else uri[7:]
        return UriPathResult(uri=uri, path=path)

    if style is None:
        style = default_authority_style()

    if style is AuthorityStyle.UNC:
        return UriPathResult(uri=uri, path=uri[5:])
    return UriPathResult(uri=uri, path=uri[6:])


def file_uri_to_path(uri: str, style: AuthorityStyle | None = None) -> str:
    """Convert a file URI to a path; returns "" if uri is not a file URI."""
    return parse_file_uri(uri, style).path


def split_root(path: str | os.PathLike[str]) -> PathParts:
    """Split a path into root-name, root-directory and relative part.

    The root-name is a drive ("c:") or a network host ("//host", "\\\\host").
    Splitting is purely textual so Windows paths split the same on any host.
    """
    text = os.fspath(path)
    match = _UNC_HOST_RE.match(text) or _DRIVE_RE.match(text)
    root_name = match.group(0) if match else ""

    rest = text[len(root_name):]
    relative_path = rest.lstrip("/\\")
    root_directory = "/" if len(relative_path) != len(rest) else ""

    return PathParts(
        root_name=root_name,
        root_directory=root_directory,
        relative_path=relative_path,
    )


def path_to_file_uri(path: str | os.PathLike[str]) -> str:
    """Convert a local or UNC path to a file URI with forward slashes."""
    parts = split_root(path)

    if parts.is_unc:
        # root-name already supplies the two slashes
        uri = "file:" + parts.root_name
    elif parts.has_root_name:
        uri = "file:///" + parts.root_name
    else:
        uri = "file://"

    uri += parts.root_directory + parts.relative_path
    return uri.replace("\\", "/")
