"""
Book Pydantic Schemas

Request bodies are validated here, before anything reaches the store.
A missing or malformed field is answered with 422 by FastAPI instead of
surfacing later as a database failure.

JSON field names follow the public contract (publishedYear); Python code
uses snake_case (published_year).
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - title and author (required, stripped, non-empty)
    - publishedYear (required integer)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Dune", "The Great Gatsby"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Frank Herbert", "F. Scott Fitzgerald"],
    )

    published_year: int = Field(
        ...,
        le=9999,
        validation_alias=AliasChoices("publishedYear", "published_year"),
        serialization_alias="publishedYear",
        description="Year the book was published",
        examples=[1965, 1925],
    )

    @field_validator("title", "author")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Reject whitespace-only text and strip surrounding spaces."""
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "publishedYear": 1965
    }
    """


class BookUpdate(BookBase):
    """
    Schema for updating an existing book.

    PUT replaces all three fields, so all of them are required.
    """


class BookResponse(BookBase):
    """Schema for book responses: the stored fields plus the generated id."""

    id: int = Field(..., description="Unique identifier assigned by the store")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
                "publishedYear": 1925,
            }
        },
    )


class MessageResponse(BaseModel):
    """Confirmation body returned by endpoints that have no resource to return."""

    message: str = Field(..., examples=["Book deleted successfully"])
