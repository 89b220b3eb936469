"""Administrators. Standalone table, not derived from users."""
from sqlalchemy import Column, String, DateTime, Index, text
from todolist.database import Base
from todolist.models.principal import new_id, utcnow


class Admin(Base):
    __tablename__ = "admins"
    __table_args__ = (
        Index(
            "uq_admins_email_active",
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
