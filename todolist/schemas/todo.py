"""Todo item schemas."""
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from todolist.models.todo import TodoStatus
from todolist.schemas.pagination import MAX_PAGE_LIMIT, PageRequest


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if not v:
        raise ValueError("Title cannot be blank")
    return v


class TodoCreate(BaseModel):
    title: str = Field(max_length=255)
    description: str | None = None
    status: TodoStatus = TodoStatus.pending

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return _strip_title(v)


class TodoUpdate(BaseModel):
    """Partial update; omitted or null fields are left unchanged."""
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    status: TodoStatus | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return _strip_title(v)


class TodoResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: str | None = None
    status: TodoStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class TodoSummary(BaseModel):
    id: str
    title: str
    status: TodoStatus

    class Config:
        from_attributes = True


class TodoSearch(PageRequest):
    limit: int = Field(100, ge=1, le=MAX_PAGE_LIMIT)
    status: TodoStatus | None = None
    search: str | None = None
