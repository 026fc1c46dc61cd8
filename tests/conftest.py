"""
Shared fixtures for envkit tests.
"""

import pytest

from envkit.store import MemoryStore, ProcessStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def environ():
    """Stand-in for os.environ."""
    return {}


@pytest.fixture
def write_env(tmp_path):
    """Write a dotenv file under tmp_path and return its path."""

    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_process_store():
    ProcessStore.reset()
    yield
    ProcessStore.reset()
