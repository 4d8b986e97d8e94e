"""
Test configuration and fixtures.
"""

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def bisect_config(temp_dir):
    """Create a YAML config selecting bisect mode on ';'."""
    config_path = temp_dir / "fold.yaml"
    config_path.write_text(
        "delimiter: ';'\n"
        "mode: bisect\n"
        "strict: true\n"
    )
    return config_path
