from pydantic import ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, ClassVar

from app.schemas.author import CamelModel

Title = Annotated[str, Field(min_length=1, max_length=255)]

# Bounds of the 32-bit INTEGER columns
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Year = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]
RecordId = Annotated[StrictInt, Field(ge=1, le=INT32_MAX)]


def _trim_title(v: object) -> object:
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
    return v


# Book base schema
class BookBase(CamelModel):
    title: Title
    publication_year: Year
    author_id: RecordId

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        return _trim_title(v)


# Book create schema
class BookCreate(BookBase):
    pass


# Book patch schema: every field independently optional
class BookUpdate(CamelModel):
    title: Title | None = None
    publication_year: Year | None = None
    author_id: RecordId | None = None

    @field_validator("title", "publication_year", "author_id", mode="before")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        return _trim_title(v)


# Stored book record, as returned by create/update
class BookRead(BookBase):
    id: int

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Author embedded in a book read
class BookAuthorRead(CamelModel):
    id: int
    first_name: str
    last_name: str

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Shaped book read: author nested, authorId omitted
class BookWithAuthor(CamelModel):
    id: int
    title: str
    publication_year: int
    author: BookAuthorRead

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
