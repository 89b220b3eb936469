"""User account schemas (admin management and self-service)."""
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, EmailStr, Field
from todolist.schemas.auth import PASSWORD_MAX_LENGTH
from todolist.schemas.pagination import PageRequest


class UserResponse(BaseModel):
    id: str
    email: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=1, max_length=PASSWORD_MAX_LENGTH)


class UserSearch(PageRequest):
    email_contains: str | None = None
    created_after: datetime | None = None
    created_before: datetime | None = None
    sort_by: Literal["created_at", "updated_at"] = "created_at"
    sort_direction: Literal["asc", "desc"] = "desc"
