from fastapi import APIRouter, Depends, Path, Request, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.services.author_service import AuthorService
from app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate, AuthorWithBooks
from app.schemas.book import INT32_MAX
from app.core.logging import get_logger
from typing import Annotated
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
)
router = APIRouter(prefix="/authors", tags=["authors"])

AuthorId = Annotated[int, Path(..., ge=1, le=INT32_MAX, description="Author ID")]


@router.post("", response_model=AuthorRead, status_code=HTTP_201_CREATED)
def create_author(
    data: AuthorCreate,
    db: Annotated[Session, Depends(get_db)],
):
    return AuthorService.create_author(db, data)


@router.get("", response_model=list[AuthorWithBooks])
def list_authors(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    logger = get_logger(__name__, request)
    logger.info("Listing authors")
    return AuthorService.list_authors(db)


@router.get("/{author_id}", response_model=AuthorWithBooks)
def get_author(
    author_id: AuthorId,
    db: Annotated[Session, Depends(get_db)],
):
    return AuthorService.get_author(db, author_id)


@router.patch("/{author_id}", response_model=AuthorRead)
def update_author(
    author_id: AuthorId,
    patch: AuthorUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    return AuthorService.update_author(db, author_id, patch)


@router.delete("/{author_id}", status_code=HTTP_200_OK, response_class=Response)
def delete_author(
    author_id: AuthorId,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    AuthorService.delete_author(db, author_id)
    return Response(status_code=HTTP_200_OK)
