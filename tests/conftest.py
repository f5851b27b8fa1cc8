import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a small directory tree for listing tests."""
    root = temp_workspace / "sample_tree"
    root.mkdir()

    (root / "sub").mkdir()
    (root / "sub" / "deep").mkdir()
    (root / "empty").mkdir()

    (root / "f1.txt").write_bytes(b"x" * 10)
    (root / "sub" / "f2.txt").write_bytes(b"y" * 20)
    (root / "sub" / "deep" / "f3.bin").write_bytes(b"\x00\xff" * 3)

    return root
