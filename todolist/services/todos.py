"""Todo CRUD shared by the user and admin routes. Callers run the ownership check first."""
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todolist.exceptions import DuplicateTitle
from todolist.models import Todo
from todolist.schemas.pagination import Page
from todolist.schemas.todo import TodoCreate, TodoSearch, TodoSummary, TodoUpdate
from todolist.services.pagination import paginate


def _title_taken(db: Session, user_id: str, title: str, exclude_id: str | None = None) -> bool:
    q = db.query(Todo.id).filter(Todo.user_id == user_id, Todo.title == title, Todo.deleted_at.is_(None))
    if exclude_id is not None:
        q = q.filter(Todo.id != exclude_id)
    return q.first() is not None


def _commit_todo(db: Session, todo: Todo) -> Todo:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        msg = str(getattr(e, "orig", None) or e).lower()
        if "title" in msg or "unique" in msg:
            raise DuplicateTitle(todo.title) from e
        raise
    db.refresh(todo)
    return todo


def create_todo(db: Session, user_id: str, data: TodoCreate) -> Todo:
    if _title_taken(db, user_id, data.title):
        raise DuplicateTitle(data.title)
    todo = Todo(user_id=user_id, title=data.title, description=data.description, status=data.status)
    db.add(todo)
    return _commit_todo(db, todo)


def update_todo(db: Session, todo: Todo, data: TodoUpdate) -> Todo:
    if data.title is not None and data.title != todo.title:
        if _title_taken(db, todo.user_id, data.title, exclude_id=todo.id):
            raise DuplicateTitle(data.title)
        todo.title = data.title
    if data.description is not None:
        todo.description = data.description
    if data.status is not None:
        todo.status = data.status
    return _commit_todo(db, todo)


def delete_todo(db: Session, todo: Todo) -> None:
    db.delete(todo)
    db.commit()


def search_todos(db: Session, data: TodoSearch, user_id: str | None = None) -> Page[TodoSummary]:
    """Newest first. user_id=None searches every owner (admin)."""
    q = db.query(Todo).filter(Todo.deleted_at.is_(None))
    if user_id is not None:
        q = q.filter(Todo.user_id == user_id)
    if data.status is not None:
        q = q.filter(Todo.status == data.status)
    if data.search:
        q = q.filter(
            or_(
                Todo.title.icontains(data.search, autoescape=True),
                Todo.description.icontains(data.search, autoescape=True),
            )
        )
    rows, pagination = paginate(q.order_by(Todo.created_at.desc(), Todo.id), data.page, data.limit)
    return Page[TodoSummary](pagination=pagination, data=[TodoSummary.model_validate(t) for t in rows])
