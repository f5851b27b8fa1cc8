"""Test that all modules can be imported successfully."""

import sys
from pathlib import Path

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def test_core_imports():
    """Test core module imports."""
    from storkutil.core import Config, ListingEntry, TransferList, FileLister

    config = Config()
    assert config.wrap_width > 0

    entry = ListingEntry(path="a.txt", size=3)
    assert entry.is_file()

    lister = FileLister(config)
    assert hasattr(lister, 'list')
    assert isinstance(TransferList("a", "a"), TransferList)


def test_utils_imports():
    """Test utils module imports."""
    from storkutil.utils import TextUtils, PathUtils, URIParser, ByteFormatter

    assert hasattr(TextUtils, 'normalize')
    assert hasattr(PathUtils, 'normalize_path')
    assert hasattr(URIParser, 'make_uri')
    assert hasattr(ByteFormatter, 'format_bytes')


def test_error_imports():
    """Test error types are exported at the top level."""
    from storkutil import StorkUtilError, PathParseError, URIParseError, FileAccessError

    for error in (PathParseError, URIParseError, FileAccessError):
        assert issubclass(error, StorkUtilError)


if __name__ == "__main__":
    test_core_imports()
    print("* Core modules OK")

    test_utils_imports()
    print("* Utils modules OK")

    test_error_imports()
    print("* Error types OK")

    print("\nAll imports verified.")
