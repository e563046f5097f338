"""File checks and hashing helpers."""

import hashlib
import os
import stat
from typing import BinaryIO

_CHUNK_SIZE = 64 * 1024


class PathError(Exception):
    """Raised when a path does not point to a readable regular file."""


def check_path_to_file(path: "str | os.PathLike[str]") -> None:
    """Raise PathError unless ``path`` names an existing regular file."""
    try:
        info = os.stat(path)
    except FileNotFoundError as err:
        raise PathError(f"Path doesn't exist: {err}") from err
    except OSError as err:
        raise PathError(f"Error accessing path: {err}") from err
    if not stat.S_ISREG(info.st_mode):
        raise PathError("Path to directory")


def calculate_sha256(stream: BinaryIO) -> "hashlib._Hash":
    """Hash everything readable from ``stream`` with SHA-256."""
    digest = hashlib.sha256()
    try:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    except OSError as err:
        raise OSError(f"Error calculating SHA256: {err}") from err
    return digest