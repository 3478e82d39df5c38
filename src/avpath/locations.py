"""Well-known application directories and URI cache locations.

Nothing here creates directories; callers mkdir what they use.
"""

from __future__ import annotations

import sys
from pathlib import Path

from avpath.config import get_settings
from avpath.subpath import uri_to_subpath


def get_data_path() -> Path:
    """AVPATH_DATA_DIR, or the "data" folder under the working directory."""
    settings = get_settings()
    if settings.DATA_DIR is not None:
        return settings.DATA_DIR
    return Path.cwd() / "data"


def get_user_documents_path() -> Path:
    """AVPATH_DOCUMENTS_DIR, or ~/Documents."""
    settings = get_settings()
    if settings.DOCUMENTS_DIR is not None:
        return settings.DOCUMENTS_DIR
    return Path.home() / "Documents"


def get_executable_path() -> Path | None:
    """Path of the running executable (the interpreter unless frozen).

    None when the interpreter cannot report it (sys.executable empty or None).
    """
    if not sys.executable:
        return None
    return Path(sys.executable)


def get_app_directory() -> Path:
    return get_user_documents_path() / get_settings().APP_NAME


def get_log_directory() -> Path:
    return get_app_directory() / "logs"


def get_cache_directory() -> Path:
    return get_app_directory() / "cache"


def cache_path_for_uri(uri: str, max_length: int | None = None) -> Path:
    """Location in the cache directory for the resource at uri.

    Args:
        uri: Resource URI.
        max_length: Subpath truncation; None uses AVPATH_SUBPATH_MAX_LENGTH.
    """
    if max_length is None:
        max_length = get_settings().subpath_max_length
    return get_cache_directory() / uri_to_subpath(uri, max_length)
