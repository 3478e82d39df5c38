"""URI/path conversion, URI subpath sanitizing, text conversion and binary file I/O."""

__version__ = "0.1.0"

from avpath.exceptions import (
    AVPathError,
    ConfigurationError,
    EncodingError,
    FileIOError,
    FileMissingError,
    MalformedUriError,
)
from avpath.fileio import read_binary_file, unique_temp_file_path, write_binary_file
from avpath.subpath import uri_to_subpath
from avpath.text import decode_wide, encode_wide, to_narrow_text, to_wide_text
from avpath.types import AuthorityStyle, MalformedUriReason, PathParts, UriPathResult
from avpath.uri import (
    file_uri_to_path,
    is_file_uri,
    is_http_uri,
    parse_file_uri,
    path_to_file_uri,
    split_root,
)

__all__ = [
    "AVPathError",
    "AuthorityStyle",
    "ConfigurationError",
    "EncodingError",
    "FileIOError",
    "FileMissingError",
    "MalformedUriError",
    "MalformedUriReason",
    "PathParts",
    "UriPathResult",
    "decode_wide",
    "encode_wide",
    "file_uri_to_path",
    "is_file_uri",
    "is_http_uri",
    "parse_file_uri",
    "path_to_file_uri",
    "read_binary_file",
    "split_root",
    "to_narrow_text",
    "to_wide_text",
    "unique_temp_file_path",
    "uri_to_subpath",
    "write_binary_file",
]
