from __future__ import annotations
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, StorageError
from app.db.session import transaction
from app.schemas.book import BookCreate, BookRead, BookUpdate, BookWithAuthor
from app.repos.author_repo import AuthorRepository
from app.repos.book_repo import BookRepository
from app.models.author import Author

logger = logging.getLogger(__name__)


class BookService:
    """
    Book lifecycle.

    Every write re-checks the referenced author against the author table
    immediately before acting. A missing author surfaces as NotFoundError;
    only SQLAlchemy failures are reported as StorageError.
    """

    @staticmethod
    def _require_author(db: Session, author_id: int) -> Author:
        author = AuthorRepository.get(db, author_id, lock=True)
        if author is None:
            raise NotFoundError(f"Author with ID {author_id} not found")
        return author

    @staticmethod
    # Create book
    def create_book(db: Session, data: BookCreate) -> BookRead:
        try:
            with transaction(db):
                BookService._require_author(db, data.author_id)
                book = BookRepository.create(db, data)
        except SQLAlchemyError as e:
            logger.exception("Failed to create book")
            raise StorageError("Error creating book") from e

        logger.info("Created book %s for author %s", book.id, data.author_id)
        return BookRead.model_validate(book)

    @staticmethod
    # List books, author nested
    def list_books(db: Session) -> list[BookWithAuthor]:
        return [
            BookWithAuthor.model_validate(b)
            for b in BookRepository.list_with_author(db)
        ]

    @staticmethod
    # Get book, author nested
    def get_book(db: Session, book_id: int) -> BookWithAuthor:
        book = BookRepository.get_with_author(db, book_id)
        if book is None:
            raise NotFoundError(f"Book with ID {book_id} not found")
        return BookWithAuthor.model_validate(book)

    @staticmethod
    # Patch book; the author reference is always re-validated
    def update_book(db: Session, book_id: int, patch: BookUpdate) -> BookRead:
        try:
            with transaction(db):
                book = BookRepository.get_for_update(db, book_id)
                if book is None:
                    raise NotFoundError(f"Book with ID {book_id} not found")

                author_id = patch.author_id if patch.author_id is not None else book.author_id
                BookService._require_author(db, author_id)

                book = BookRepository.update(db, book, patch)
        except SQLAlchemyError as e:
            logger.exception("Failed to update book %s", book_id)
            raise StorageError("Error updating the book") from e

        logger.info("Updated book %s", book_id)
        return BookRead.model_validate(book)

    @staticmethod
    # Delete book
    def delete_book(db: Session, book_id: int) -> None:
        try:
            with transaction(db):
                book = BookRepository.get_for_update(db, book_id)
                if book is None:
                    raise NotFoundError(f"Book with ID {book_id} not found")
                BookRepository.delete(db, book)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete book %s", book_id)
            raise StorageError("Error deleting book") from e

        logger.info("Deleted book %s", book_id)
