"""
Note Model.

Database model for notes.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notedesk.backend.models.base import Base, IntegerIdMixin, TimestampMixin
from notedesk.backend.models.category import Category
from notedesk.backend.models.note_category import NoteCategory


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    A short text note with an archive flag. Its categories are a
    read-only view over the note_categories join table, loaded eagerly
    so every note leaves the data layer with its tags attached.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    archived: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
        index=True,
    )

    categories: Mapped[list[Category]] = relationship(
        Category,
        secondary=NoteCategory.__table__,
        order_by=[Category.name, Category.id],
        lazy="selectin",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, archived={self.archived})>"
