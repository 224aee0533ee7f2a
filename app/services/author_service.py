import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import ConflictError, NotFoundError, StorageError
from app.db.session import transaction
from app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate, AuthorWithBooks
from app.repos.author_repo import AuthorRepository

logger = logging.getLogger(__name__)


class AuthorService:
    """
    Author lifecycle.
    Owns the deletion guard: an author that still has books is never removed.
    """

    @staticmethod
    # Create author
    def create_author(db: Session, data: AuthorCreate) -> AuthorRead:
        try:
            with transaction(db):
                author = AuthorRepository.create(db, data)
        except SQLAlchemyError as e:
            logger.exception("Failed to create author")
            raise StorageError("Error creating author") from e

        logger.info("Created author %s", author.id)
        return AuthorRead.model_validate(author)

    @staticmethod
    # List authors with their books
    def list_authors(db: Session) -> list[AuthorWithBooks]:
        return [
            AuthorWithBooks.model_validate(a)
            for a in AuthorRepository.list_with_books(db)
        ]

    @staticmethod
    # Get author with its books
    def get_author(db: Session, author_id: int) -> AuthorWithBooks:
        author = AuthorRepository.get_with_books(db, author_id)
        if author is None:
            raise NotFoundError(f"Author with ID {author_id} not found")
        return AuthorWithBooks.model_validate(author)

    @staticmethod
    # Patch author; books are not reloaded for the response
    def update_author(db: Session, author_id: int, patch: AuthorUpdate) -> AuthorRead:
        try:
            with transaction(db):
                author = AuthorRepository.get(db, author_id)
                if author is None:
                    raise NotFoundError(f"Author with ID {author_id} not found")
                author = AuthorRepository.update(db, author, patch)
        except SQLAlchemyError as e:
            logger.exception("Failed to update author %s", author_id)
            raise StorageError("Error updating author") from e

        logger.info("Updated author %s", author_id)
        return AuthorRead.model_validate(author)

    @staticmethod
    # Delete author unless it still has books
    def delete_author(db: Session, author_id: int) -> None:
        try:
            with transaction(db):
                # Row lock: a concurrent book insert for this author waits on it
                author = AuthorRepository.get_with_books(db, author_id, for_update=True)
                if author is None:
                    raise NotFoundError(f"Author with ID {author_id} not found")
                if author.books:
                    raise ConflictError(
                        f"Cannot delete author with ID {author_id} because they have books"
                    )
                AuthorRepository.delete(db, author)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete author %s", author_id)
            raise StorageError("Error deleting author") from e

        logger.info("Deleted author %s", author_id)
