"""Registered users. Soft-deleted via deleted_at; email unique among active rows."""
from sqlalchemy import Column, String, DateTime, Index, text
from sqlalchemy.orm import relationship
from todolist.database import Base
from todolist.models.principal import new_id, utcnow


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_active",
            "email",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")
