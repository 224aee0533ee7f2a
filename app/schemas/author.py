from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, ClassVar

Name = Annotated[str, Field(min_length=2, max_length=100)]


# Shared camelCase wire format
class CamelModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Author base schema
class AuthorBase(CamelModel):
    first_name: Name
    last_name: Name

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def trim(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


# Author create schema
class AuthorCreate(AuthorBase):
    pass


# Author patch schema: every field independently optional
class AuthorUpdate(CamelModel):
    first_name: Name | None = None
    last_name: Name | None = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def trim_and_reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v.strip() if isinstance(v, str) else v


# Author read schema (no books)
class AuthorRead(AuthorBase):
    id: int

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Book as listed under its author
class AuthorBookRead(CamelModel):
    id: int
    title: str
    publication_year: int
    author_id: int

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Author read schema with its books
class AuthorWithBooks(AuthorRead):
    books: list[AuthorBookRead] = []
