from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.models.author import Author
from app.schemas.author import AuthorCreate, AuthorUpdate


class AuthorRepository:
    """Repository for Author model. Writes flush; the service owns the commit."""

    @staticmethod
    # Create a new author
    def create(db: Session, data: AuthorCreate) -> Author:
        author = Author(first_name=data.first_name, last_name=data.last_name)
        db.add(author)
        db.flush()
        return author

    @staticmethod
    # List authors with their books
    def list_with_books(db: Session) -> list[Author]:
        stmt = select(Author).options(selectinload(Author.books)).order_by(Author.id)
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get an author by ID
    def get(db: Session, author_id: int, lock: bool = False) -> Author | None:
        stmt = select(Author).where(Author.id == author_id)
        if lock:
            # FOR KEY SHARE: blocks deletion of the author, not other readers
            stmt = stmt.with_for_update(read=True, key_share=True)
        return db.scalars(stmt).first()

    @staticmethod
    # Get an author by ID together with its books
    def get_with_books(
        db: Session, author_id: int, for_update: bool = False
    ) -> Author | None:
        stmt = (
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.books))
        )
        if for_update:
            stmt = stmt.with_for_update()
        return db.scalars(stmt).first()

    @staticmethod
    # Merge present patch fields onto a loaded author
    def update(db: Session, author: Author, patch: AuthorUpdate) -> Author:
        for field, value in patch.model_dump(exclude_unset=True).items():
            setattr(author, field, value)
        db.flush()
        return author

    @staticmethod
    # Delete a loaded author
    def delete(db: Session, author: Author) -> None:
        db.delete(author)
        db.flush()
