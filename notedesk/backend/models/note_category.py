"""
Note-Category Association Model.

Join table recording that a note is tagged with a category.
"""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.backend.models.base import Base


class NoteCategory(Base):
    """
    One tagging link between a note and a category.

    The composite primary key keeps each (note, category) pair unique.
    Rows are written only by the association repository.
    """

    __tablename__ = "note_categories"

    note_id: Mapped[int] = mapped_column(
        ForeignKey("notes.id"),
        primary_key=True,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<NoteCategory(note_id={self.note_id}, category_id={self.category_id})>"
