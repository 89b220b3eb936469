"""Page envelope shared by every search endpoint."""
from typing import Generic, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")

MAX_PAGE_LIMIT = 1000


class Pagination(BaseModel):
    current: int
    limit: int
    records: int
    pages: int


class Page(BaseModel, Generic[T]):
    pagination: Pagination
    data: list[T]


class PageRequest(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=MAX_PAGE_LIMIT)
