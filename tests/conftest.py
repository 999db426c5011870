"""Pytest configuration and fixtures for the bookmark backend tests."""

import atexit
import os
import shutil
import tempfile

# app.py builds a module-level app from Config on import; keep it off the real data dir
_session_data_dir = tempfile.mkdtemp()
atexit.register(shutil.rmtree, _session_data_dir, ignore_errors=True)
os.environ["BOOKMARKS_FILE"] = os.path.join(_session_data_dir, "bookmarks.json")

import pytest

from app import create_app
from database import FileBookmarkStore, MemoryBookmarkStore


@pytest.fixture
def sample_bookmarks():
    """Two stored bookmarks, A (id=1) and B (id=2)."""
    return [
        {
            "id": 1,
            "title": "A",
            "url": "https://a.test",
            "category": "Development",
            "description": "First bookmark",
            "dateAdded": "2024-01-15",
        },
        {
            "id": 2,
            "title": "B",
            "url": "https://b.test",
            "category": "Tools",
            "description": "",
            "dateAdded": "2024-01-16",
        },
    ]


@pytest.fixture
def memory_store(sample_bookmarks):
    return MemoryBookmarkStore(sample_bookmarks)


@pytest.fixture
def empty_store():
    return MemoryBookmarkStore([])


@pytest.fixture
def file_store(tmp_path, sample_bookmarks):
    store = FileBookmarkStore(tmp_path / "bookmarks.json")
    store.write_all(sample_bookmarks)
    return store


@pytest.fixture
def app(file_store):
    return create_app(store=file_store)


@pytest.fixture
def client(app):
    return app.test_client()
