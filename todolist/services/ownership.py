"""Ownership check used by every todo and user route: owner or admin, otherwise Forbidden."""
from sqlalchemy.orm import Session

from todolist.exceptions import Forbidden, NotFound
from todolist.models import PrincipalRole, Todo, User
from todolist.schemas.auth import PrincipalPayload


def ensure_owner_or_admin(principal: PrincipalPayload, owner_id: str) -> None:
    if principal.type == PrincipalRole.admin:
        return
    if principal.id != owner_id:
        raise Forbidden("You do not own this resource")


def get_user_for(db: Session, principal: PrincipalPayload, user_id: str) -> User:
    """Active user user_id, readable by that user or an admin."""
    ensure_owner_or_admin(principal, user_id)
    user = db.query(User).filter(User.id == user_id, User.deleted_at.is_(None)).first()
    if not user:
        raise NotFound("User not found")
    return user


def get_todo_for(
    db: Session,
    principal: PrincipalPayload,
    todo_id: str,
    user_id: str | None = None,
) -> Todo:
    """
    Active todo todo_id, if principal owns it or is an admin.

    user_id scopes the lookup to one owner (nested /users/{user_id}/todos
    routes); that user must be active, and a todo owned by someone else is
    then reported as NotFound.
    """
    if user_id is not None:
        get_user_for(db, principal, user_id)
    todo = db.query(Todo).filter(Todo.id == todo_id, Todo.deleted_at.is_(None)).first()
    if not todo or (user_id is not None and todo.user_id != user_id):
        raise NotFound("Todo not found")
    ensure_owner_or_admin(principal, todo.user_id)
    return todo
