"""stork-util: string, path, listing and URI helpers for file transfers."""

from .core import (
    Config,
    ListingEntry,
    TransferList,
    FileLister,
    StorkUtilError,
    PathParseError,
    URIParseError,
    FileAccessError,
)
from .utils import TextUtils, PathUtils, URIParser, ByteFormatter

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ListingEntry",
    "TransferList",
    "FileLister",
    "StorkUtilError",
    "PathParseError",
    "URIParseError",
    "FileAccessError",
    "TextUtils",
    "PathUtils",
    "URIParser",
    "ByteFormatter",
]
