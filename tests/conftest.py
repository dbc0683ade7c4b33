"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides injectable sources, a scrubbed process environment and .env files for all tests
"""

import os
import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from strict_env import MappingSource


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "PORT": "9001",
        "TIMEOUT": "30",
        "FLAG": "",
        "DEBUG": "true",
        "RATIO": "0.25",
        "BAD_PORT": "not-a-number",
    }


@pytest.fixture
def mapping_source(test_env_vars):
    """Provide an injected source holding the test variables."""
    return MappingSource(test_env_vars)


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Mock environment variables for testing."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        for name in ("MISSING_VAR", "UNSET_TIMEOUT"):
            os.environ.pop(name, None)
        yield test_env_vars


@pytest.fixture
def env_file(temp_dir):
    """Provide a .env file with a mix of set, empty and declared-only keys."""
    path = temp_dir / ".env"
    path.write_text(
        "# test settings\n"
        "PORT=8080\n"
        "HOST=localhost\n"
        "EMPTY=\n"
        "DECLARED_ONLY\n"
        'QUOTED="hello world"\n'
    )
    return path


@pytest.fixture
def captured_console():
    """Provide a Rich console that writes to a buffer."""
    return Console(file=StringIO(), width=200)
