# Database models package. Importing it registers every table on Base.metadata.
from notedesk.backend.models.base import Base
from notedesk.backend.models.category import Category
from notedesk.backend.models.note import Note
from notedesk.backend.models.note_category import NoteCategory

__all__ = [
    "Base",
    "Category",
    "Note",
    "NoteCategory",
]
