"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image

from dupremover.database import FingerprintIndex
from dupremover.models import FileRecord


H1 = "a" * 64
H2 = "b" * 64
H3 = "c" * 64


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def sample_trees(temp_dir):
    """
    Create a primary and a secondary directory with real image files.

    Returns:
        dict with paths to:
        - primary, secondary: the two directory roots
        - red_primary, red_secondary: identical files in both trees
        - blue_primary: only in the primary tree
        - green_secondary: only in the secondary tree (in a subdirectory)
        - notes: a non-image file in the secondary tree
    """
    primary = temp_dir / "primary"
    secondary = temp_dir / "secondary"
    (secondary / "nested").mkdir(parents=True)
    primary.mkdir()

    paths = {'primary': primary, 'secondary': secondary}

    red = Image.new('RGB', (100, 100), color='red')
    red.save(primary / "red.png", 'PNG')
    red.save(secondary / "red_copy.png", 'PNG')
    paths['red_primary'] = str((primary / "red.png").resolve())
    paths['red_secondary'] = str((secondary / "red_copy.png").resolve())

    Image.new('RGB', (100, 100), color='blue').save(primary / "blue.png", 'PNG')
    paths['blue_primary'] = str((primary / "blue.png").resolve())

    Image.new('RGB', (50, 50), color='green').save(secondary / "nested" / "green.png", 'PNG')
    paths['green_secondary'] = str((secondary / "nested" / "green.png").resolve())

    notes = secondary / "notes.txt"
    notes.write_text("not an image")
    paths['notes'] = str(notes.resolve())

    return paths


@pytest.fixture
def temp_index_db(temp_dir):
    """Path of a database file for index tests."""
    return str(temp_dir / "test_index.db")


@pytest.fixture
def index(temp_index_db):
    """Empty fingerprint index."""
    idx = FingerprintIndex(db_path=temp_index_db)
    yield idx
    idx.close()


@pytest.fixture
def scenario_index(index):
    """
    Index with /a/1.jpg and /b/1.jpg sharing hash H1, /a/2.jpg (H2) and
    /b/3.jpg (H3) unique; every file is 1024 bytes.
    """
    index.put_batch([
        FileRecord("/a/1.jpg", H1, 1024),
        FileRecord("/a/2.jpg", H2, 1024),
        FileRecord("/b/1.jpg", H1, 1024),
        FileRecord("/b/3.jpg", H3, 1024),
    ])
    return index
