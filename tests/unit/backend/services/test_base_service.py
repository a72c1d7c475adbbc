"""
Unit Tests for Base Service.

Tests the BaseService error translation and validation helpers.
"""

import pytest
from unittest.mock import AsyncMock

from sqlalchemy.exc import IntegrityError, OperationalError

from notedesk.backend.core.exceptions import (
    ConflictError,
    DatabaseError,
    ValidationError,
)
from notedesk.backend.services.base import BaseService


class TestExecuteDbOperation:
    """Tests for _execute_db_operation method."""

    @pytest.fixture
    def service(self):
        """Create a BaseService instance."""
        return BaseService(AsyncMock())

    @pytest.mark.asyncio
    async def test_returns_result_on_success(self, service):
        """Should return the awaitable's result on success."""
        async def successful_operation():
            return {"id": 1, "name": "Work"}

        result = await service._execute_db_operation("op", successful_operation())

        assert result == {"id": 1, "name": "Work"}

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_conflict(self, service):
        """Should raise ConflictError with the given message on a unique violation."""
        async def failing_operation():
            raise IntegrityError(
                "INSERT INTO categories",
                {},
                Exception("UNIQUE constraint failed: categories.name"),
            )

        with pytest.raises(ConflictError) as exc_info:
            await service._execute_db_operation(
                "create_category",
                failing_operation(),
                conflict_message="Name taken",
            )

        assert exc_info.value.message == "Name taken"
        assert exc_info.value.code == "RES_CONFLICT"

    @pytest.mark.asyncio
    async def test_postgres_duplicate_key_becomes_conflict(self, service):
        """Should recognise PostgreSQL's duplicate key wording."""
        async def failing_operation():
            raise IntegrityError(
                "INSERT INTO categories",
                {},
                Exception('duplicate key value violates constraint "categories_name_key"'),
            )

        with pytest.raises(ConflictError):
            await service._execute_db_operation("create_category", failing_operation())

    @pytest.mark.asyncio
    async def test_other_integrity_error_becomes_database_error(self, service):
        """Should raise DatabaseError for non-unique constraint violations."""
        async def failing_operation():
            raise IntegrityError(
                "DELETE FROM notes",
                {},
                Exception("FOREIGN KEY constraint failed"),
            )

        with pytest.raises(DatabaseError) as exc_info:
            await service._execute_db_operation("delete_note", failing_operation())

        assert "delete_note" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_operational_error_becomes_database_error(self, service):
        """Should raise DatabaseError when the database cannot be reached."""
        async def failing_operation():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        with pytest.raises(DatabaseError) as exc_info:
            await service._execute_db_operation("list_notes", failing_operation())

        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestValidateRequired:
    """Tests for _validate_required method."""

    @pytest.fixture
    def service(self):
        return BaseService(AsyncMock())

    def test_passes_when_all_present(self, service):
        service._validate_required({"title": "T", "content": "C"}, ["title", "content"])

    def test_blank_string_is_missing(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service._validate_required({"title": "   ", "content": "C"}, ["title", "content"])

        assert exc_info.value.details == {"missing_fields": ["title"]}

    def test_absent_field_is_missing(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service._validate_required({}, ["content"])

        assert exc_info.value.details["missing_fields"] == ["content"]
