"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = CategoryService(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


# =============================================================================
# Domain Object Fixtures
# =============================================================================


def make_category(category_id: int = 1, name: str = "Work") -> MagicMock:
    """Build a stand-in for a Category row."""
    category = MagicMock()
    category.id = category_id
    category.name = name
    return category


def make_note(
    note_id: int = 1,
    title: str = "Title",
    content: str = "Content",
    archived: bool = False,
    categories: list | None = None,
) -> MagicMock:
    """Build a stand-in for a Note row."""
    note = MagicMock()
    note.id = note_id
    note.title = title
    note.content = content
    note.archived = archived
    note.categories = categories or []
    return note


@pytest.fixture
def category_factory():
    """Provide the category stand-in builder."""
    return make_category


@pytest.fixture
def note_factory():
    """Provide the note stand-in builder."""
    return make_note


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            service._logger = mock_logger
            ...
            mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
