"""Filesystem access used by discovery and move execution."""

import os
import shutil
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class EntryStat:
    """The parts of a stat result filemover cares about."""

    is_directory: bool
    is_file: bool


class FileSystem(Protocol):
    """Filesystem operations. Every method raises ``OSError`` on failure."""

    def list_directory(self, path: Path) -> list[str]:
        ...

    def stat_entry(self, path: Path) -> EntryStat:
        ...

    def create_directory(self, path: Path, recursive: bool = True) -> None:
        ...

    def move_entry(self, source: Path, destination: Path) -> None:
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def list_directory(self, path: Path) -> list[str]:
        # Listing order is whatever the OS returns; callers rely on it as-is
        return os.listdir(path)

    def stat_entry(self, path: Path) -> EntryStat:
        mode = os.stat(path).st_mode
        return EntryStat(is_directory=stat.S_ISDIR(mode), is_file=stat.S_ISREG(mode))

    def create_directory(self, path: Path, recursive: bool = True) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def move_entry(self, source: Path, destination: Path) -> None:
        shutil.move(str(source), str(destination))


def stat_if_exists(filesystem: FileSystem, path: Path) -> EntryStat | None:
    """
    Stat a path, returning ``None`` when it does not exist.

    Any stat failure other than absence propagates.
    """
    try:
        return filesystem.stat_entry(path)
    except (FileNotFoundError, NotADirectoryError):
        return None


def entry_exists(filesystem: FileSystem, path: Path) -> bool:
    """Check whether a path exists. Errors other than absence propagate."""
    return stat_if_exists(filesystem, path) is not None
