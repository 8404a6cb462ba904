"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Unknown fields are dropped rather than rejected.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    description: str | None = Field(None, examples=["A short introduction."])
    body: str = Field(..., min_length=1, examples=["This is the article body."])
    published: bool = False


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    body: str | None = Field(None, min_length=1)
    published: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields the client actually supplied.

        ``description`` may be cleared with an explicit null; the other fields
        ignore nulls.
        """
        supplied = self.model_dump(include=self.model_fields_set)
        return {
            name: value
            for name, value in supplied.items()
            if value is not None or name == "description"
        }


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str | None
    body: str
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
