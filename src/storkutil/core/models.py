"""
Core data models for stork-util.

This module contains the configuration and the transfer-list structures
produced by the file lister.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, '').strip()
    return int(value) if value.isdigit() else default


@dataclass
class Config:
    """Configuration settings for stork-util."""

    follow_symlinks: bool = field(default_factory=lambda: _env_flag('STORKUTIL_FOLLOW_SYMLINKS'))
    show_progress: bool = field(default_factory=lambda: _env_flag('STORKUTIL_SHOW_PROGRESS'))
    sort_entries: bool = field(default_factory=lambda: _env_flag('STORKUTIL_SORT_ENTRIES'))
    wrap_width: int = field(default_factory=lambda: _env_int('STORKUTIL_WRAP_WIDTH', 80))


@dataclass
class ListingEntry:
    """A file or directory in a transfer list."""

    path: str  # relative to the list root, '/' separated
    is_dir: bool = False
    size: int = 0

    def is_file(self) -> bool:
        """Check if this entry represents a file."""
        return not self.is_dir


@dataclass
class TransferList:
    """
    Flat listing of files and directories to transfer.

    Entries are kept in discovery order. For a recursive listing that
    order is breadth-first, so a directory always comes before its
    own children.
    """

    source_root: str
    dest_root: str
    entries: List[ListingEntry] = field(default_factory=list)

    def add(self, path: str, is_dir: bool = False, size: int = 0) -> ListingEntry:
        """Append an entry and return it."""
        entry = ListingEntry(path=path, is_dir=is_dir, size=0 if is_dir else size)
        self.entries.append(entry)
        return entry

    def __iter__(self) -> Iterator[ListingEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def file_paths(self) -> List[str]:
        return [e.path for e in self.entries if e.is_file()]

    @property
    def directory_paths(self) -> List[str]:
        return [e.path for e in self.entries if e.is_dir]

    @property
    def total_files(self) -> int:
        return sum(1 for e in self.entries if e.is_file())

    @property
    def total_size(self) -> int:
        """Total size in bytes of all file entries."""
        return sum(e.size for e in self.entries if e.is_file())

    def summary(self) -> str:
        """Get a one-line summary of the listing."""
        dirs = len(self.entries) - self.total_files
        return (f"{self.source_root}: {self.total_files} files, "
                f"{dirs} directories, {self.total_size} bytes")
