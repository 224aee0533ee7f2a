from fastapi import APIRouter, Depends, Path, Request, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.services.book_service import BookService
from app.schemas.book import INT32_MAX, BookCreate, BookRead, BookUpdate, BookWithAuthor
from app.core.logging import get_logger
from typing import Annotated
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
)
router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[int, Path(..., ge=1, le=INT32_MAX, description="Book ID")]


@router.post("", response_model=BookRead, status_code=HTTP_201_CREATED)
def create_book(
    data: BookCreate,
    db: Annotated[Session, Depends(get_db)],
):
    return BookService.create_book(db, data)


@router.get("", response_model=list[BookWithAuthor])
def list_books(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    logger = get_logger(__name__, request)
    logger.info("Listing books")
    return BookService.list_books(db)


@router.get("/{book_id}", response_model=BookWithAuthor)
def get_book(
    book_id: BookId,
    db: Annotated[Session, Depends(get_db)],
):
    return BookService.get_book(db, book_id)


@router.patch("/{book_id}", response_model=BookRead)
def update_book(
    book_id: BookId,
    patch: BookUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    return BookService.update_book(db, book_id, patch)


@router.delete("/{book_id}", status_code=HTTP_200_OK, response_class=Response)
def delete_book(
    book_id: BookId,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    BookService.delete_book(db, book_id)
    return Response(status_code=HTTP_200_OK)
