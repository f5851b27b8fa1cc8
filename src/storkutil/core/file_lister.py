"""
Local filesystem lister for stork-util.

This module walks a local path and produces a flat TransferList:
- A single file becomes a one-entry list
- A directory is walked breadth-first, recording every directory and
  file with its size relative to the root
"""

import os
import logging
from collections import deque
from typing import Optional

from tqdm import tqdm

from .errors import FileAccessError
from .models import Config, TransferList
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class FileLister:
    """Builds transfer lists from the local filesystem."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def size(self, path: str) -> int:
        """
        Get the size of a file in bytes.

        Raises:
            FileAccessError: If the file does not exist or cannot be stat'ed.
        """
        try:
            return os.path.getsize(path)
        except OSError as e:
            logger.warning(f"Cannot stat {path}: {e}")
            raise FileAccessError(path, e.strerror or str(e)) from e

    def list(self, path: str) -> TransferList:
        """
        List a file or directory tree.

        Args:
            path: Local path to a file or directory.

        Returns:
            TransferList rooted at ``path``. For a directory, entries are
            relative to it and discovered breadth-first.

        Raises:
            FileAccessError: If the root is missing or any directory in the
                tree cannot be listed. No partial result is returned.
        """
        if not os.path.isdir(path):
            listing = TransferList(source_root=path, dest_root=path)
            listing.add(path, size=self.size(path))
            return listing

        logger.debug(f"Listing directory tree {path}")
        listing = TransferList(source_root=path, dest_root=path)
        queue = deque([""])
        # (st_dev, st_ino) of every directory queued so far; stops symlink loops
        try:
            seen = {self._dir_key(path, follow_symlinks=True)}
        except OSError as e:
            logger.warning(f"Cannot stat {path}: {e}")
            raise FileAccessError(path, e.strerror or str(e)) from e

        with tqdm(desc=f"Listing {path}", unit="dir", disable=not self.config.show_progress) as progress:
            while queue:
                rel_dir = queue.popleft()
                for name, is_dir, size, key in self._scan(path, rel_dir):
                    rel_path = PathUtils.join_path_components([rel_dir, name]) if rel_dir else name
                    if not is_dir:
                        listing.add(rel_path, size=size)
                        continue
                    listing.add(rel_path, is_dir=True)
                    if key in seen:
                        logger.debug(f"Not descending into {rel_path}, already visited")
                        continue
                    seen.add(key)
                    queue.append(rel_path)
                progress.update(1)

        logger.debug(f"Listed {listing.summary()}")
        return listing

    def _scan(self, root: str, rel_dir: str):
        """Read one directory, returning (name, is_dir, size, dir_key) tuples."""
        full_path = os.path.join(root, rel_dir) if rel_dir else root
        follow = self.config.follow_symlinks
        items = []

        try:
            with os.scandir(full_path) as it:
                for entry in it:
                    if entry.is_dir(follow_symlinks=follow):
                        items.append((entry.name, True, 0, self._dir_key(entry.path, follow)))
                    else:
                        items.append((entry.name, False, entry.stat(follow_symlinks=follow).st_size, None))
        except OSError as e:
            failed = e.filename or full_path
            logger.warning(f"Error listing contents of {failed}: {e}")
            raise FileAccessError(os.fsdecode(failed), e.strerror or str(e)) from e

        if self.config.sort_entries:
            items.sort(key=lambda item: item[0])
        return items

    @staticmethod
    def _dir_key(path: str, follow_symlinks: bool):
        """Identify a directory by device and inode."""
        st = os.stat(path, follow_symlinks=follow_symlinks)
        return st.st_dev, st.st_ino
