"""
Whole-file binary I/O and unique temp file paths.

read_binary_file raises on failure; write_binary_file reports failure by
returning False. Each call opens and closes its own handle. Concurrent
access to the same path must be serialized by the caller.
"""

from __future__ import annotations

import itertools
import os
import secrets
import tempfile
from pathlib import Path

from avpath.config import get_settings
from avpath.exceptions import FileIOError, FileMissingError
from avpath.logging import get_logger

logger = get_logger(__name__)

TEMP_FILE_PREFIX = "avpath-"

_temp_counter = itertools.count()


def read_binary_file(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file.

    Args:
        path: File to read.

    Returns:
        The file contents; b"" for an empty file.

    Raises:
        FileMissingError: If the file does not exist.
        FileIOError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise FileMissingError(
            "File not found", context={"path": os.fspath(path)}
        ) from e
    except OSError as e:
        raise FileIOError(
            "Failed to read file",
            context={"path": os.fspath(path), "errno": e.errno},
        ) from e


def write_binary_file(
    path: str | os.PathLike[str],
    data: bytes | bytearray | memoryview,
    length: int | None = None,
) -> bool:
    """Create or truncate path and write the first length bytes of data.

    Args:
        path: File to write.
        data: Source buffer.
        length: Number of bytes to write; None writes all of data.

    Returns:
        True once the file is written, flushed and closed; False on an OS error.

    Raises:
        ValueError: If length is negative or larger than data.
    """
    view = memoryview(data).cast("B")
    if length is None:
        length = view.nbytes
    if length < 0 or length > view.nbytes:
        raise ValueError(f"length must be between 0 and {view.nbytes}, got {length}")

    try:
        with open(path, "wb") as f:
            f.write(view[:length])
            f.flush()
    except OSError as e:
        logger.error(
            "Failed to write file",
            path=os.fspath(path),
            length=length,
            errno=e.errno,
            error=str(e),
        )
        return False

    logger.debug("Wrote file", path=os.fspath(path), length=length)
    return True


def unique_temp_file_path(
    suffix: str = "", directory: str | os.PathLike[str] | None = None
) -> Path:
    """Return a path no existing file uses, without creating the file.

    Names combine the process id, a per-process counter and a random token,
    so they are unique among paths handed out by live processes.

    Args:
        suffix: Appended to the file name (e.g. ".bin").
        directory: Where the path points; defaults to AVPATH_TEMP_DIR or the
            platform temp directory.
    """
    if directory is None:
        directory = get_settings().TEMP_DIR or tempfile.gettempdir()
    base = Path(directory)

    while True:
        name = f"{TEMP_FILE_PREFIX}{os.getpid()}-{next(_temp_counter)}-{secrets.token_hex(4)}{suffix}"
        candidate = base / name
        if not candidate.exists():
            return candidate
