"""Anonymous guest principals. No credentials; created on join."""
from sqlalchemy import Column, String, DateTime
from todolist.database import Base
from todolist.models.principal import new_id, utcnow


class Guest(Base):
    __tablename__ = "guests"

    id = Column(String(36), primary_key=True, default=new_id)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
