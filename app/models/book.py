from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.author import Author

#Book
class Book(Base):
    __tablename__: str = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_year: Mapped[int] = mapped_column("publicationYear", Integer, nullable=False)
    author_id: Mapped[int] = mapped_column(
        "authorId",
        Integer,
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
    )

    # Only populated by explicit eager loads in BookRepository
    author: Mapped[Author] = relationship(back_populates="books", lazy="raise")
