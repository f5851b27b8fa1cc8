"""Path string utilities for '/'-delimited transfer paths."""

import re
from typing import List, Optional

from ..core.errors import PathParseError

REGEX_SLASHES = re.compile(r'/+')

# Characters never legal in a URI path, plus '?' and '#' which would
# start a query or fragment.
REGEX_ILLEGAL = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}?#]')
REGEX_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


class PathUtils:
    """
    Utilities for consistent path handling.

    Like the text helpers, everything except ``normalize_path`` treats
    None as an empty string and never raises.
    """

    @staticmethod
    def split_path(path: Optional[str]) -> List[str]:
        """
        Split a path into its components.

        The first element is ``"/"`` if the path is absolute, and the last
        element is an empty string if the path names a directory (has a
        trailing slash). Runs of slashes count as one separator.

        Args:
            path: Path to split

        Returns:
            List of path components, e.g. ``"/a/b/"`` -> ``["/", "a", "b", ""]``
        """
        path = path or ""
        if path.startswith('/'):
            return ['/'] + REGEX_SLASHES.split(path.lstrip('/'))
        return REGEX_SLASHES.split(path)

    @staticmethod
    def join_path_components(components: List[str]) -> str:
        """
        Join path components with forward slashes.

        Args:
            components: List of path components

        Returns:
            Joined path with forward slashes
        """
        return '/'.join(components)

    @staticmethod
    def basename(path: Optional[str]) -> str:
        """Get everything after the last slash, or the whole path if none."""
        path = path or ""
        return path[path.rfind('/') + 1:]

    @staticmethod
    def dirname(path: Optional[str]) -> str:
        """Get everything before the last slash, or "" if there is none."""
        path = path or ""
        i = path.rfind('/')
        return "" if i == -1 else path[:i]

    @staticmethod
    def remove_dot_segments(path: str) -> str:
        """
        Resolve ``.`` and ``..`` segments and collapse repeated slashes.

        A ``..`` that would climb above the root of an absolute path is
        dropped. In a relative path, leading ``..`` segments are kept.
        A trailing slash survives, and so does the implied one left by a
        final ``.`` or ``..``.
        """
        if not path:
            return path

        absolute = path.startswith('/')
        segments = REGEX_SLASHES.split(path.strip('/'))
        trailing = path.endswith('/') or segments[-1] in ('.', '..')

        stack: List[str] = []
        for segment in segments:
            if segment in ('', '.'):
                continue
            if segment == '..':
                if stack and stack[-1] != '..':
                    stack.pop()
                elif not absolute:
                    stack.append(segment)
                continue
            stack.append(segment)

        result = '/'.join(stack)
        if absolute:
            result = '/' + result
        if trailing and stack:
            result += '/'
        return result

    @staticmethod
    def normalize_path(path: Optional[str]) -> str:
        """
        Normalize a path string.

        Resolves ``.`` and ``..`` segments, collapses repeated slashes, and
        turns a leading ``/~`` back into ``~`` so home-relative paths keep
        their meaning.

        Args:
            path: Path to normalize

        Returns:
            Normalized path, e.g. ``"/a/./b/../c"`` -> ``"/a/c"``

        Raises:
            PathParseError: If the path contains characters that cannot
                appear in a URI path
        """
        path = path or ""

        match = REGEX_ILLEGAL.search(path)
        if match:
            raise PathParseError(path, f"illegal character {match.group()!r} at index {match.start()}")
        match = REGEX_BAD_ESCAPE.search(path)
        if match:
            raise PathParseError(path, f"malformed escape at index {match.start()}")

        path = PathUtils.remove_dot_segments(path)
        if path.startswith('/~'):
            path = path[1:]
        return path
