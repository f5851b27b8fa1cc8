"""Utility modules for stork-util."""

from .text_utils import TextUtils
from .path_utils import PathUtils
from .uri_parser import URIParser
from .byte_formatter import ByteFormatter

__all__ = ["TextUtils", "PathUtils", "URIParser", "ByteFormatter"]
