"""File-system queries: sizes, inode types and directory listings."""

from __future__ import annotations

import enum
import os
import stat
from typing import Optional, Union

__all__ = ["InodeType", "get_size", "inode_type", "list_dir_contents"]

PathLike = Union[str, "os.PathLike[str]"]


class InodeType(enum.Enum):
    """What kind of entry a path names."""

    NOT_EXIST = "not_exist"
    DIRECTORY = "directory"
    FILE = "file"


def get_size(path: PathLike) -> Optional[int]:
    """Return the size of ``path`` in bytes, or None if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return None


def inode_type(path: PathLike) -> InodeType:
    """Classify ``path``; raises ValueError for entries that are neither file nor directory."""
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return InodeType.NOT_EXIST
    if stat.S_ISDIR(mode):
        return InodeType.DIRECTORY
    if stat.S_ISREG(mode):
        return InodeType.FILE
    raise ValueError(f"unknown inode type {os.fspath(path)}")


def list_dir_contents(path: PathLike) -> list[str]:
    """Return the sorted names inside ``path``; an absent directory is empty."""
    try:
        return sorted(os.listdir(path))
    except FileNotFoundError:
        return []