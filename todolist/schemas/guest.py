"""Guest schemas."""
from datetime import datetime
from pydantic import BaseModel
from todolist.schemas.pagination import PageRequest


class GuestResponse(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class GuestUpdate(BaseModel):
    """Admins can deactivate (set deleted_at) or reactivate (null) a guest."""
    deleted_at: datetime | None = None


class GuestSearch(PageRequest):
    pass
