"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model. Categories are loaded with every note through
the model's eager relationship.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.models.note import Note
from notedesk.backend.models.note_category import NoteCategory
from notedesk.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def find_all(
        self,
        archived: bool | None = None,
        category_id: int | None = None,
    ) -> list[Note]:
        """
        Get notes matching the given filters, newest first.

        Args:
            archived: If given, only notes whose flag equals it
            category_id: If given, only notes tagged with this category

        Returns:
            List of notes; every note when no filter is given
        """
        query = select(Note)

        if archived is not None:
            query = query.where(Note.archived == archived)

        if category_id is not None:
            tagged = (
                select(NoteCategory.note_id)
                .where(NoteCategory.category_id == category_id)
            )
            query = query.where(Note.id.in_(tagged))

        result = await self.session.execute(
            query
            .order_by(Note.created_at.desc(), Note.id.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
