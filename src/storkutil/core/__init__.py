"""Core components for stork-util."""

from .models import Config, ListingEntry, TransferList
from .errors import StorkUtilError, PathParseError, URIParseError, FileAccessError
from .file_lister import FileLister

__all__ = [
    "Config",
    "ListingEntry",
    "TransferList",
    "StorkUtilError",
    "PathParseError",
    "URIParseError",
    "FileAccessError",
    "FileLister",
]
