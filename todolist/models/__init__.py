"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table and index.
"""
from todolist.models.principal import PrincipalRole
from todolist.models.guest import Guest
from todolist.models.user import User
from todolist.models.admin import Admin
from todolist.models.todo import Todo, TodoStatus

__all__ = [
    "PrincipalRole",
    "Guest",
    "User",
    "Admin",
    "Todo",
    "TodoStatus",
]
