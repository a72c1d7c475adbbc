"""
Association Service.

Owns the many-to-many link between notes and categories. Links are only
ever replaced wholesale through set_categories; the note and category
services call the remove_all_* helpers when they delete an endpoint.
"""

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.core.exceptions import NotFoundError
from notedesk.backend.core.utils import utc_now
from notedesk.backend.models.category import Category
from notedesk.backend.models.note import Note
from notedesk.backend.repositories.category import CategoryRepository
from notedesk.backend.repositories.note import NoteRepository
from notedesk.backend.repositories.note_category import NoteCategoryRepository
from notedesk.backend.services.base import BaseService


class AssociationService(BaseService):
    """
    Service for note/category tagging.

    After a successful set_categories call the links of a note are exactly
    the requested existing categories, minus any category deleted since.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteCategoryRepository(session)
        self.note_repo = NoteRepository(session)
        self.category_repo = CategoryRepository(session)

    async def set_categories(
        self,
        note_id: int,
        category_ids: Iterable[int],
    ) -> Note:
        """
        Replace the categories of a note.

        Duplicate ids collapse into one link. Ids that do not name an
        existing category are dropped without error.

        Args:
            note_id: Note to tag
            category_ids: Desired categories

        Returns:
            The note with its refreshed category list

        Raises:
            NotFoundError: If the note does not exist
        """
        if not await self.note_repo.exists(note_id):
            raise NotFoundError(f"Note {note_id} not found")

        requested = list(dict.fromkeys(category_ids))
        existing = await self.category_repo.get_existing_ids(set(requested))
        kept = [category_id for category_id in requested if category_id in existing]

        dropped = [category_id for category_id in requested if category_id not in existing]
        if dropped:
            # TODO: decide with the frontend whether unknown ids should become a 400.
            self._logger.warning(
                "Ignoring unknown category ids",
                extra={"note_id": note_id, "category_ids": dropped},
            )

        self._log_operation(
            "Setting note categories",
            note_id=note_id,
            category_ids=kept,
        )

        await self._execute_db_operation(
            "set_note_categories",
            self._replace_links(note_id, kept),
        )

        return await self.note_repo.get_by_id(note_id)

    async def _replace_links(self, note_id: int, category_ids: list[int]) -> None:
        await self.repo.delete_for_note(note_id)
        await self.repo.insert_links(note_id, category_ids)
        note = await self.note_repo.get_by_id(note_id)
        await self.note_repo.update(note, updated_at=utc_now())

    async def remove_all_for_note(self, note_id: int) -> int:
        """Remove every link of a note. Removing nothing is not an error."""
        removed = await self.repo.delete_for_note(note_id)
        self._log_debug("Removed note links", note_id=note_id, removed=removed)
        return removed

    async def remove_all_for_category(self, category_id: int) -> int:
        """Remove every link of a category. Removing nothing is not an error."""
        removed = await self.repo.delete_for_category(category_id)
        self._log_debug("Removed category links", category_id=category_id, removed=removed)
        return removed

    async def categories_for(self, note_id: int) -> list[Category]:
        """Get the categories currently linked to a note, ordered by name."""
        return await self.repo.get_categories(note_id)
