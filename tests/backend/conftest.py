"""
Backend-specific test fixtures and configuration.

mongomock does not implement user management or collection options, so
steps that run server commands are tested against a mocked database.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


class AsyncCursor:
    """Minimal async iterable standing in for a Motor command cursor."""

    def __init__(self, items):
        self._items = list(items)

    def __aiter__(self):
        self._iter = iter(self._items)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def mock_command_db():
    """
    Create a mocked Motor database for command-level steps.

    Configure per test:

        mock_command_db.command.return_value = {"users": []}
        mock_command_db.list_collection_names.return_value = ["users"]
    """
    db = MagicMock()
    db.name = "selco_auth_test"
    db.command = AsyncMock(return_value={"ok": 1.0})
    db.list_collection_names = AsyncMock(return_value=[])
    db.create_collection = AsyncMock()
    db.list_collections = AsyncMock(return_value=AsyncCursor([]))
    return db


@pytest.fixture
def async_cursor():
    """Factory for async iterable cursors over a list of documents."""
    return AsyncCursor
