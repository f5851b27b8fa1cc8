"""String normalization, joining and wrapping helpers."""

import re
from typing import Any, List, Optional

from ..core.models import Config

# Pre-compiled patterns, shared for the life of the process
REGEX_WS = re.compile(r'\s+')
REGEX_CSV = re.compile(r'\s*,\s*')
REGEX_NORM = re.compile(r'[^a-z0-9_+,.\-]+')


class TextUtils:
    """
    Static string helpers.

    All of these treat None like an empty string and never raise.
    """

    @staticmethod
    def normalize(s: Optional[str]) -> str:
        """
        Normalize a string for use as an identifier.

        Lowercases the string, turns every run of characters other than
        alphanumerics or ``-_+,.`` into a single space, trims it, and then
        replaces the remaining whitespace runs with ``_``.

        Args:
            s: String to normalize

        Returns:
            Normalized string, e.g. ``"Hello  World!!"`` -> ``"hello_world"``
        """
        if s is None:
            return ""
        s = REGEX_NORM.sub(' ', s.lower()).strip()
        return REGEX_WS.sub('_', s)

    @staticmethod
    def split_csv(s: Optional[str]) -> List[str]:
        """
        Split a comma-separated string into normalized pieces.

        Each piece is normalized after splitting. Doubled commas give an
        empty piece rather than being merged.
        """
        if s is None:
            s = ""
        return [TextUtils.normalize(piece) for piece in REGEX_CSV.split(s)]

    @staticmethod
    def join_with(delimiter: Optional[str], *items: Any) -> str:
        """
        Join the string form of each item with a delimiter.

        None items are skipped along with their delimiter, and a None
        delimiter joins with nothing.
        """
        if delimiter is None:
            delimiter = ""
        return delimiter.join(str(item) for item in items if item is not None)

    @staticmethod
    def join(*items: Any) -> str:
        """Join items with spaces."""
        return TextUtils.join_with(" ", *items)

    @staticmethod
    def join_csv(*items: Any) -> str:
        """Collapse items back into a CSV string."""
        return TextUtils.join_with(", ", *items)

    @staticmethod
    def wrap(text: Optional[str], width: Optional[int] = None) -> str:
        """
        Greedily wrap a paragraph to lines shorter than ``width``.

        A word longer than ``width`` is put on its own line unbroken.

        Args:
            text: Paragraph to wrap
            width: Line width, defaults to ``Config().wrap_width``. A line
                is flushed once adding a space and the next word would make
                it ``width`` characters or more

        Returns:
            Wrapped text with lines joined by newlines
        """
        if width is None:
            width = Config().wrap_width

        lines = []
        line = ""

        for word in REGEX_WS.split(text or ""):
            if not word:
                continue
            if line and len(line) + 1 + len(word) >= width:
                lines.append(line)
                line = word
            else:
                line = f"{line} {word}" if line else word

        if line:
            lines.append(line)

        return "\n".join(lines)
