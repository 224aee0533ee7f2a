from sqlalchemy.orm import Session, joinedload
from app.models.book import Book
from app.schemas.book import BookCreate, BookUpdate
from sqlalchemy import select


class BookRepository:
    """Repository for Book model. Writes flush; the service owns the commit."""

    @staticmethod
    # Create a new book
    def create(db: Session, data: BookCreate) -> Book:
        book = Book(**data.model_dump())
        db.add(book)
        db.flush()
        return book

    @staticmethod
    # List books with their author
    def list_with_author(db: Session) -> list[Book]:
        stmt = select(Book).options(joinedload(Book.author)).order_by(Book.id)
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get a book by ID
    def get(db: Session, book_id: int) -> Book | None:
        stmt = select(Book).where(Book.id == book_id)
        return db.scalars(stmt).first()

    @staticmethod
    # Get a book by ID for update
    def get_for_update(db: Session, book_id: int) -> Book | None:
        stmt = select(Book).where(Book.id == book_id).with_for_update()
        return db.scalars(stmt).first()

    @staticmethod
    # Get a book by ID together with its author
    def get_with_author(db: Session, book_id: int) -> Book | None:
        stmt = select(Book).where(Book.id == book_id).options(joinedload(Book.author))
        return db.scalars(stmt).first()

    @staticmethod
    # Merge present patch fields onto a loaded book
    def update(db: Session, book: Book, patch: BookUpdate) -> Book:
        for field, value in patch.model_dump(exclude_unset=True).items():
            setattr(book, field, value)
        db.flush()
        return book

    @staticmethod
    # Delete a loaded book
    def delete(db: Session, book: Book) -> None:
        db.delete(book)
        db.flush()
