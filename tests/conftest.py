"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from piglatin.core import Translator
from tests.fixtures.sample_phrases import SAMPLE_LETTER, SAMPLE_NOTES


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    """Provide an output directory that does not exist yet."""
    return tmp_path / "pig_out"


@pytest.fixture
def translator(output_dir):
    """Create a translator engine writing into a temporary directory."""
    return Translator(output_dir=str(output_dir))


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_text_file(tmp_path):
    """Create a temporary text file."""
    file_path = tmp_path / "letter.txt"
    file_path.write_text(SAMPLE_LETTER, encoding="utf-8")
    return file_path


@pytest.fixture
def temp_text_dir(tmp_path):
    """Create a directory with supported and unsupported files."""
    source_dir = tmp_path / "letters"
    source_dir.mkdir()
    (source_dir / "letter.txt").write_text(SAMPLE_LETTER, encoding="utf-8")
    (source_dir / "notes.md").write_text(SAMPLE_NOTES, encoding="utf-8")
    (source_dir / "image.png").write_bytes(b"\x89PNG\r\n")
    (source_dir / "nested").mkdir()
    return source_dir
