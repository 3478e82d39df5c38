"""
Core types for avpath.

- AuthorityStyle: how the authority of a file://host/... URI maps to a path
- MalformedUriReason: why a URI could not be converted
- UriPathResult: outcome of a URI to path conversion
- PathParts: root-name / root-directory / relative decomposition of a path
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

from avpath.exceptions import MalformedUriError


class AuthorityStyle(str, Enum):
    """Interpretation of the authority in file://authority/path."""

    UNC = "unc"  # //host/path
    PLAIN_PREFIX = "plain"  # /host/path

    @classmethod
    def platform_default(cls) -> AuthorityStyle:
        """Return the style native to the running platform."""
        return cls.UNC if sys.platform == "win32" else cls.PLAIN_PREFIX


class MalformedUriReason(str, Enum):
    """Reasons a string is not a convertible file URI."""

    TOO_SHORT = "too_short"
    WRONG_SCHEME = "wrong_scheme"


@dataclass(frozen=True)
class UriPathResult:
    """Result of converting a file URI to a path.

    Either path is set and reason is None, or path is empty and reason
    says what was wrong with the input.
    """

    uri: str
    path: str = ""
    reason: MalformedUriReason | None = None

    @property
    def ok(self) -> bool:
        """True if the conversion produced a path."""
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> str:
        """Return the path or raise MalformedUriError."""
        if self.reason is not None:
            raise MalformedUriError(
                "Not a convertible file URI",
                context={"uri": self.uri, "reason": self.reason.value},
            )
        return self.path

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict."""
        return {
            "uri": self.uri,
            "path": self.path,
            "reason": self.reason.value if self.reason else None,
        }


@dataclass(frozen=True)
class PathParts:
    """A path split the way a Windows-aware filesystem library splits it."""

    root_name: str
    root_directory: str
    relative_path: str

    @property
    def has_root_name(self) -> bool:
        return bool(self.root_name)

    @property
    def is_unc(self) -> bool:
        """True if the root-name is a network host (//host or \\\\host)."""
        return self.root_name[:2] in ("//", "\\\\")
