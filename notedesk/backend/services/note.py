"""
Note Service.

Business logic layer for notes. Orchestrates repositories,
handles validation, and implements business rules.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.core.utils import utc_now
from notedesk.backend.models.note import Note
from notedesk.backend.repositories.note import NoteRepository
from notedesk.backend.schemas.note import NoteCreate, NoteUpdate
from notedesk.backend.services.association import AssociationService
from notedesk.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Every note returned carries its current categories. Archiving is a
    plain flag: any note may be archived or unarchived at any time, and
    repeating either is harmless.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.associations = AssociationService(session)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note with no categories.

        Args:
            data: Note creation data

        Returns:
            Created note

        Raises:
            ValidationError: If title or content is blank
        """
        self._validate_required(data.model_dump(), ["title", "content"])

        self._log_operation("Creating note", title=data.title, archived=data.archived)

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create(
                title=data.title,
                content=data.content,
                archived=data.archived,
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def get_note(self, note_id: int) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.repo.get_by_id(note_id)

    async def list_notes(
        self,
        archived: bool | None = None,
        category_id: int | None = None,
    ) -> list[Note]:
        """
        List notes, newest first.

        Args:
            archived: Only notes with this archive flag, if given
            category_id: Only notes tagged with this category, if given

        Returns:
            List of notes matching every given filter
        """
        self._log_debug("Listing notes", archived=archived, category_id=category_id)
        return await self.repo.find_all(archived=archived, category_id=category_id)

    async def update_note(self, note_id: int, data: NoteUpdate) -> Note:
        """
        Update an existing note.

        Args:
            note_id: Note ID to update
            data: Update data; fields left unset are not touched

        Returns:
            Updated note

        Raises:
            NotFoundError: If note not found
            ValidationError: If title or content is set to a blank value
        """
        note = await self.repo.get_by_id(note_id)

        update_data = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }

        if not update_data:
            return note

        text_fields = [name for name in ("title", "content") if name in update_data]
        self._validate_required(update_data, text_fields)

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_note",
            self.repo.update(note, updated_at=utc_now(), **update_data),
        )

    async def set_archived(self, note_id: int, archived: bool) -> Note:
        """
        Set the archive flag of a note.

        Raises:
            NotFoundError: If note not found
        """
        note = await self.repo.get_by_id(note_id)

        self._log_operation("Setting archive flag", note_id=note_id, archived=archived)

        return await self._execute_db_operation(
            "set_archived",
            self.repo.update(note, archived=archived, updated_at=utc_now()),
        )

    async def archive_note(self, note_id: int) -> Note:
        """Archive a note. Archiving an archived note succeeds."""
        return await self.set_archived(note_id, True)

    async def unarchive_note(self, note_id: int) -> Note:
        """Unarchive a note. Unarchiving an active note succeeds."""
        return await self.set_archived(note_id, False)

    async def delete_note(self, note_id: int) -> Note:
        """
        Delete a note and its category links.

        Returns:
            The note as it was just before deletion, categories included

        Raises:
            NotFoundError: If note not found
        """
        note = await self.repo.get_by_id(note_id)

        self._log_operation("Deleting note", note_id=note_id)

        await self._execute_db_operation(
            "delete_note",
            self._delete_with_links(note),
        )
        return note

    async def _delete_with_links(self, note: Note) -> None:
        await self.associations.remove_all_for_note(note.id)
        await self.repo.delete(note)
