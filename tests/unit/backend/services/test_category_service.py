"""
Unit Tests for Category Service.

Tests the CategoryService business rules with mocked repositories.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import IntegrityError

from notedesk.backend.core.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from notedesk.backend.services.category import CategoryService


@pytest.fixture
def service():
    """Create CategoryService with mocked session."""
    return CategoryService(AsyncMock())


class TestCreateCategory:
    """Tests for category creation."""

    @pytest.mark.asyncio
    async def test_trims_name_before_saving(self, service, category_factory):
        """Should store the name without surrounding whitespace."""
        category = category_factory(1, "Work")

        with patch.object(service.repo, "name_taken", return_value=False), \
             patch.object(service.repo, "create", return_value=category) as mock_create:
            result = await service.create_category("  Work  ")

        mock_create.assert_called_once_with(name="Work")
        assert result is category

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    async def test_empty_name_rejected(self, service, name):
        """Should raise ValidationError when nothing is left after trimming."""
        with patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ValidationError):
                await service.create_category(name)

        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, service):
        """Should raise ConflictError when the trimmed name exists."""
        with patch.object(service.repo, "name_taken", return_value=True) as mock_taken, \
             patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ConflictError):
                await service.create_category("  Work ")

        mock_taken.assert_called_once_with("Work")
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unique_constraint_race_reports_conflict(self, service):
        """Should report a lost race on the unique constraint as ConflictError."""
        race = IntegrityError(
            "INSERT INTO categories",
            {},
            Exception("UNIQUE constraint failed: categories.name"),
        )

        with patch.object(service.repo, "name_taken", return_value=False), \
             patch.object(service.repo, "create", side_effect=race):
            with pytest.raises(ConflictError) as exc_info:
                await service.create_category("Work")

        assert "already in use" in exc_info.value.message


class TestRenameCategory:
    """Tests for category renaming."""

    @pytest.mark.asyncio
    async def test_rename_success(self, service, category_factory):
        """Should update the name after the checks pass."""
        category = category_factory(3, "Old")
        renamed = category_factory(3, "New")

        with patch.object(service.repo, "get_by_id", return_value=category), \
             patch.object(service.repo, "name_taken", return_value=False) as mock_taken, \
             patch.object(service.repo, "update", return_value=renamed) as mock_update:
            result = await service.rename_category(3, " New ")

        mock_taken.assert_called_once_with("New", exclude_id=3)
        mock_update.assert_called_once_with(category, name="New")
        assert result.name == "New"

    @pytest.mark.asyncio
    async def test_rename_to_own_name_succeeds(self, service, category_factory):
        """Should not conflict with itself and skip the write."""
        category = category_factory(3, "Work")

        with patch.object(service.repo, "get_by_id", return_value=category), \
             patch.object(service.repo, "name_taken", return_value=False), \
             patch.object(service.repo, "update") as mock_update:
            result = await service.rename_category(3, "Work")

        assert result is category
        mock_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_rename_unknown_category(self, service):
        """Should raise NotFoundError for an unknown id."""
        with patch.object(
            service.repo, "get_by_id", side_effect=NotFoundError("Category 9 not found")
        ):
            with pytest.raises(NotFoundError):
                await service.rename_category(9, "Anything")

    @pytest.mark.asyncio
    async def test_rename_to_other_categorys_name(self, service, category_factory):
        """Should raise ConflictError when another category has the name."""
        with patch.object(service.repo, "get_by_id", return_value=category_factory(3, "Old")), \
             patch.object(service.repo, "name_taken", return_value=True), \
             patch.object(service.repo, "update") as mock_update:
            with pytest.raises(ConflictError):
                await service.rename_category(3, "Home")

        mock_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_rename_validates_before_lookup(self, service):
        """Should reject an empty name without touching the database."""
        with patch.object(service.repo, "get_by_id") as mock_get:
            with pytest.raises(ValidationError):
                await service.rename_category(3, "  ")

        mock_get.assert_not_called()


class TestDeleteCategory:
    """Tests for category deletion."""

    @pytest.mark.asyncio
    async def test_links_removed_before_category(self, service, category_factory):
        """Should clear the category's note links, then delete it."""
        category = category_factory(5, "Work")
        order = []

        with patch.object(service.repo, "get_by_id", return_value=category), \
             patch.object(
                 service.associations,
                 "remove_all_for_category",
                 side_effect=lambda category_id: order.append(("links", category_id)),
             ), \
             patch.object(
                 service.repo,
                 "delete",
                 side_effect=lambda instance: order.append(("category", instance.id)),
             ):
            await service.delete_category(5)

        assert order == [("links", 5), ("category", 5)]

    @pytest.mark.asyncio
    async def test_delete_unknown_category(self, service):
        """Should raise NotFoundError and remove nothing."""
        with patch.object(
            service.repo, "get_by_id", side_effect=NotFoundError("Category 9 not found")
        ), patch.object(service.associations, "remove_all_for_category") as mock_remove:
            with pytest.raises(NotFoundError):
                await service.delete_category(9)

        mock_remove.assert_not_called()


class TestLookups:
    """Tests for listing and finding categories."""

    @pytest.mark.asyncio
    async def test_list_categories_uses_ordered_query(self, service, category_factory):
        categories = [category_factory(2, "Home"), category_factory(1, "Work")]

        with patch.object(service.repo, "get_all_ordered", return_value=categories):
            result = await service.list_categories()

        assert [c.name for c in result] == ["Home", "Work"]

    @pytest.mark.asyncio
    async def test_find_by_name_trims(self, service):
        with patch.object(service.repo, "get_by_name", return_value=None) as mock_get:
            result = await service.find_category_by_name("  Work ")

        mock_get.assert_called_once_with("Work")
        assert result is None
