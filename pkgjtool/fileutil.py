"""Plain file helpers: existence, renaming, directory creation and removal."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

__all__ = ["file_exists", "rename", "mkdirs", "rm", "delete_dir", "load", "save"]

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(path: PathLike) -> bool:
    """Return True if anything exists at ``path``."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def rename(source: PathLike, target: PathLike) -> None:
    """Move ``source`` to ``target``, replacing any existing target."""
    try:
        os.replace(source, target)
    except OSError as exc:
        raise OSError(
            exc.errno,
            f"failed to rename from {os.fspath(source)} to {os.fspath(target)}: {exc.strerror}",
        ) from exc


def mkdirs(path: PathLike) -> None:
    """Create ``path`` and every missing parent; existing entries are left alone."""
    target = Path(path)
    prefixes = [*reversed(target.parents), target]
    for prefix in prefixes:
        if prefix == Path(".") or prefix.is_dir():
            continue
        try:
            os.mkdir(prefix, 0o777)
        except FileExistsError:
            pass


def rm(path: PathLike) -> None:
    """Remove a file, ignoring any failure."""
    try:
        os.unlink(path)
    except OSError:
        pass


def delete_dir(path: PathLike) -> None:
    """Remove a directory tree; a missing directory is not an error."""
    try:
        entries = list(os.scandir(path))
    except FileNotFoundError:
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            delete_dir(entry.path)
        else:
            os.unlink(entry.path)
    os.rmdir(path)


def load(path: PathLike) -> bytes:
    """Return the whole content of a file."""
    return Path(path).read_bytes()


def save(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, truncating any previous content."""
    Path(path).write_bytes(bytes(data))