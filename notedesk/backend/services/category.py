"""
Category Service.

Business logic for categories: trimmed, non-empty, unique names and
deletion that takes the category's note links with it.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.core.exceptions import ConflictError, ValidationError
from notedesk.backend.core.utils import normalize_name
from notedesk.backend.models.category import Category
from notedesk.backend.repositories.category import CategoryRepository
from notedesk.backend.services.association import AssociationService
from notedesk.backend.services.base import BaseService

EMPTY_NAME_MESSAGE = "Category name cannot be empty."
DUPLICATE_NAME_MESSAGE = "This category name is already in use. Categories must be unique."


class CategoryService(BaseService):
    """
    Service for category business logic.

    Names are compared exactly after trimming. The pre-write uniqueness
    check is not locked; a concurrent duplicate is caught by the unique
    constraint and reported as the same ConflictError.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = CategoryRepository(session)
        self.associations = AssociationService(session)

    def _clean_name(self, name: str | None) -> str:
        cleaned = normalize_name(name)
        if not cleaned:
            raise ValidationError(EMPTY_NAME_MESSAGE, details={"name": "must not be empty"})
        return cleaned

    async def create_category(self, name: str) -> Category:
        """
        Create a new category.

        Args:
            name: Category name; surrounding whitespace is removed

        Returns:
            Created category

        Raises:
            ValidationError: If the name is empty after trimming
            ConflictError: If a category with that name already exists
        """
        cleaned = self._clean_name(name)

        if await self.repo.name_taken(cleaned):
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        self._log_operation("Creating category", name=cleaned)

        category = await self._execute_db_operation(
            "create_category",
            self.repo.create(name=cleaned),
            conflict_message=DUPLICATE_NAME_MESSAGE,
        )

        self._log_debug("Category created", category_id=category.id)
        return category

    async def rename_category(self, category_id: int, name: str) -> Category:
        """
        Rename a category.

        Renaming a category to its current name succeeds.

        Raises:
            ValidationError: If the name is empty after trimming
            NotFoundError: If the category does not exist
            ConflictError: If another category already has the name
        """
        cleaned = self._clean_name(name)
        category = await self.repo.get_by_id(category_id)

        if await self.repo.name_taken(cleaned, exclude_id=category_id):
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        if category.name == cleaned:
            return category

        self._log_operation(
            "Renaming category",
            category_id=category_id,
            old_name=category.name,
            new_name=cleaned,
        )

        return await self._execute_db_operation(
            "rename_category",
            self.repo.update(category, name=cleaned),
            conflict_message=DUPLICATE_NAME_MESSAGE,
        )

    async def list_categories(self) -> list[Category]:
        """List all categories ordered by name, then id."""
        return await self.repo.get_all_ordered()

    async def find_category(self, category_id: int) -> Category | None:
        """Get a category by ID, or None."""
        return await self.repo.get_by_id_or_none(category_id)

    async def find_category_by_name(self, name: str) -> Category | None:
        """Get the category whose stored name equals the trimmed `name`, or None."""
        return await self.repo.get_by_name(normalize_name(name))

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category and every note link pointing at it.

        Notes that carried the category survive without it.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self.repo.get_by_id(category_id)

        self._log_operation("Deleting category", category_id=category_id)

        await self._execute_db_operation(
            "delete_category",
            self._delete_with_links(category),
        )

    async def _delete_with_links(self, category: Category) -> None:
        await self.associations.remove_all_for_category(category.id)
        await self.repo.delete(category)
