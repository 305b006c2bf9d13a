"""News API request and response schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 255
DESCRIPTION_MIN_LENGTH = 10

MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 100


class NewsCreateRequest(BaseModel):
    """Body of POST /noticias. Unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: str = Field(..., min_length=DESCRIPTION_MIN_LENGTH)


class NewsUpdateRequest(BaseModel):
    """Body of PATCH /noticias/{id}. Only the fields sent are applied."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, min_length=DESCRIPTION_MIN_LENGTH)

    @field_validator("title", "description", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        return value


class NewsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    created_at: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"), serialization_alias="createdAt")
    updated_at: datetime = Field(validation_alias=AliasChoices("updated_at", "updatedAt"), serialization_alias="updatedAt")


class PaginationMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int = Field(validation_alias=AliasChoices("total_pages", "totalPages"), serialization_alias="totalPages")


class PaginatedNewsResponse(BaseModel):
    data: List[NewsResponse]
    meta: PaginationMeta
