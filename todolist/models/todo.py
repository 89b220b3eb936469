"""Todo items. Each one belongs to exactly one user."""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum as SQLEnum, Index, text
from sqlalchemy.orm import relationship
from todolist.database import Base
from todolist.models.principal import new_id, utcnow
import enum


class TodoStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


class Todo(Base):
    __tablename__ = "todos"
    __table_args__ = (
        # A user cannot hold two active todos with the same title
        Index(
            "uq_todos_user_title_active",
            "user_id",
            "title",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        SQLEnum(TodoStatus, values_callable=lambda e: [m.value for m in e]),
        default=TodoStatus.pending,
        nullable=False,
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="todos")
