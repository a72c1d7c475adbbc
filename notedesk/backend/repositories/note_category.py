"""
Note-Category Repository.

Data access layer for the note_categories join table. This is the only
module that issues writes against that table.
"""

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.models.category import Category
from notedesk.backend.models.note_category import NoteCategory


class NoteCategoryRepository:
    """Repository for note/category tagging links."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def delete_for_note(self, note_id: int) -> int:
        """Remove every link of a note. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(NoteCategory).where(NoteCategory.note_id == note_id)
        )
        return result.rowcount

    async def delete_for_category(self, category_id: int) -> int:
        """Remove every link of a category. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(NoteCategory).where(NoteCategory.category_id == category_id)
        )
        return result.rowcount

    async def insert_links(self, note_id: int, category_ids: list[int]) -> None:
        """Insert one link per category id. Ids must be distinct and existing."""
        if not category_ids:
            return
        await self.session.execute(
            insert(NoteCategory),
            [
                {"note_id": note_id, "category_id": category_id}
                for category_id in category_ids
            ],
        )

    async def get_categories(self, note_id: int) -> list[Category]:
        """Get the categories linked to a note, ordered by name."""
        result = await self.session.execute(
            select(Category)
            .join(NoteCategory, NoteCategory.category_id == Category.id)
            .where(NoteCategory.note_id == note_id)
            .order_by(Category.name.asc(), Category.id.asc())
        )
        return list(result.scalars().all())

    async def count_for_note(self, note_id: int) -> int:
        """Count the links of a note."""
        result = await self.session.execute(
            select(func.count())
            .select_from(NoteCategory)
            .where(NoteCategory.note_id == note_id)
        )
        return result.scalar_one()
