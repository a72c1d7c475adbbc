"""
Category Model.

A named label that notes can be tagged with.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.backend.models.base import Base, IntegerIdMixin


class Category(IntegerIdMixin, Base):
    """
    Category database model.

    Names are stored trimmed and are unique, compared case-sensitively.
    The unique constraint is the final word when two writers race.
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r})>"
