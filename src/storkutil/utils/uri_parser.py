"""Strict URI parsing and normalization."""

import re
from urllib.parse import SplitResult, urlsplit

from ..core.errors import URIParseError
from .path_utils import PathUtils, REGEX_BAD_ESCAPE

# Whitespace, controls and the delimiters RFC 3986 excludes outright
REGEX_URI_ILLEGAL = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')


class URIParser:
    """Parse-and-validate helpers for transfer endpoint URIs."""

    @staticmethod
    def make_uri(raw: str) -> SplitResult:
        """
        Parse a string as a URI and normalize it.

        The scheme and host are lowercased, and ``.``/``..`` segments and
        repeated slashes are removed from the path. A URI without a scheme
        is rejected; no default scheme is assumed.

        Args:
            raw: String to parse

        Returns:
            The normalized URI as a ``SplitResult``

        Raises:
            URIParseError: If the string is not a valid URI or has no scheme
        """
        if raw is None:
            raise URIParseError("", "no URI given")

        match = REGEX_URI_ILLEGAL.search(raw)
        if match:
            raise URIParseError(raw, f"illegal character {match.group()!r} at index {match.start()}")
        match = REGEX_BAD_ESCAPE.search(raw)
        if match:
            raise URIParseError(raw, f"malformed escape at index {match.start()}")

        try:
            parts = urlsplit(raw)
            parts.port  # raises ValueError on a malformed port
        except ValueError as e:
            raise URIParseError(raw, str(e)) from e

        if not parts.scheme:
            raise URIParseError(raw, "URI has no scheme")
        if not (parts.netloc or parts.path or parts.query or parts.fragment):
            raise URIParseError(raw, "expected scheme-specific part")

        netloc = parts.netloc
        if netloc:
            userinfo, at, hostport = netloc.rpartition('@')
            netloc = userinfo + at + hostport.lower()

        return parts._replace(
            scheme=parts.scheme.lower(),
            netloc=netloc,
            path=PathUtils.remove_dot_segments(parts.path),
        )

    @staticmethod
    def is_valid(raw: str) -> bool:
        """Check whether a string parses as a URI with a scheme."""
        try:
            URIParser.make_uri(raw)
        except URIParseError:
            return False
        return True
