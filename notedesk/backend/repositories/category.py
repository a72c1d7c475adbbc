"""
Category Repository.

Data access layer for categories.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.models.category import Category
from notedesk.backend.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """
    Repository for Category model.

    Name lookups compare the stored value exactly; callers pass
    names that are already trimmed.
    """

    model = Category

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_all_ordered(self) -> list[Category]:
        """Get all categories ordered by name, then id."""
        result = await self.session.execute(
            select(Category).order_by(Category.name.asc(), Category.id.asc())
        )
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Category | None:
        """Get the category with exactly this name."""
        result = await self.session.execute(
            select(Category).where(Category.name == name)
        )
        return result.scalar_one_or_none()

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        """
        Check whether a category other than `exclude_id` uses `name`.

        Args:
            name: Trimmed category name
            exclude_id: Category allowed to hold the name (the one being renamed)

        Returns:
            True if another category already has the name
        """
        query = select(Category.id).where(Category.name == name)
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def get_existing_ids(self, ids: set[int]) -> set[int]:
        """Return the subset of `ids` that belong to existing categories."""
        if not ids:
            return set()
        result = await self.session.execute(
            select(Category.id).where(Category.id.in_(ids))
        )
        return set(result.scalars().all())
