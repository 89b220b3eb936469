"""Todo items: users manage their own, admins manage everyone's."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.dependencies import require_admin, require_user
from todolist.schemas.auth import PrincipalPayload
from todolist.schemas.pagination import Page
from todolist.schemas.todo import TodoCreate, TodoResponse, TodoSearch, TodoSummary, TodoUpdate
from todolist.services.ownership import ensure_owner_or_admin, get_todo_for, get_user_for
from todolist.services.todos import create_todo, delete_todo, search_todos, update_todo

router = APIRouter(prefix="/todoList", tags=["todos"])


# --- user: own todos ---

@router.post("/user/todos", response_model=TodoResponse, status_code=201)
def create_my_todo(
    data: TodoCreate,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    return TodoResponse.model_validate(create_todo(db, user.id, data))


@router.patch("/user/todos", response_model=Page[TodoSummary])
def search_my_todos(
    data: TodoSearch,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    return search_todos(db, data, user_id=user.id)


@router.get("/user/todos/{todo_id}", response_model=TodoResponse)
def get_my_todo(todo_id: str, db: Session = Depends(get_db), user: PrincipalPayload = Depends(require_user)):
    return TodoResponse.model_validate(get_todo_for(db, user, todo_id))


@router.put("/user/todos/{todo_id}", response_model=TodoResponse)
def update_my_todo(
    todo_id: str,
    data: TodoUpdate,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    todo = get_todo_for(db, user, todo_id)
    return TodoResponse.model_validate(update_todo(db, todo, data))


@router.delete("/user/todos/{todo_id}", status_code=204)
def delete_my_todo(todo_id: str, db: Session = Depends(get_db), user: PrincipalPayload = Depends(require_user)):
    delete_todo(db, get_todo_for(db, user, todo_id))
    return Response(status_code=204)


# --- user: todos addressed by owner id (must be self) ---

@router.patch("/user/users/{user_id}/todos", response_model=Page[TodoSummary])
def search_user_todos(
    user_id: str,
    data: TodoSearch,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    ensure_owner_or_admin(user, user_id)
    return search_todos(db, data, user_id=user_id)


@router.get("/user/users/{user_id}/todos/{todo_id}", response_model=TodoResponse)
def get_user_todo(
    user_id: str,
    todo_id: str,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    ensure_owner_or_admin(user, user_id)
    return TodoResponse.model_validate(get_todo_for(db, user, todo_id, user_id=user_id))


@router.put("/user/users/{user_id}/todos/{todo_id}", response_model=TodoResponse)
def update_user_todo(
    user_id: str,
    todo_id: str,
    data: TodoUpdate,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    ensure_owner_or_admin(user, user_id)
    todo = get_todo_for(db, user, todo_id, user_id=user_id)
    return TodoResponse.model_validate(update_todo(db, todo, data))


@router.delete("/user/users/{user_id}/todos/{todo_id}", status_code=204)
def delete_user_todo(
    user_id: str,
    todo_id: str,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    ensure_owner_or_admin(user, user_id)
    delete_todo(db, get_todo_for(db, user, todo_id, user_id=user_id))
    return Response(status_code=204)


# --- admin: any todo ---

@router.patch("/admin/todos", response_model=Page[TodoSummary])
def admin_search_todos(
    data: TodoSearch,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    return search_todos(db, data)


@router.get("/admin/todos/{todo_id}", response_model=TodoResponse)
def admin_get_todo(todo_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    return TodoResponse.model_validate(get_todo_for(db, admin, todo_id))


@router.put("/admin/todos/{todo_id}", response_model=TodoResponse)
def admin_update_todo(
    todo_id: str,
    data: TodoUpdate,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    todo = get_todo_for(db, admin, todo_id)
    return TodoResponse.model_validate(update_todo(db, todo, data))


@router.delete("/admin/todos/{todo_id}", status_code=204)
def admin_delete_todo(todo_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    delete_todo(db, get_todo_for(db, admin, todo_id))
    return Response(status_code=204)


@router.patch("/admin/users/{user_id}/todos", response_model=Page[TodoSummary])
def admin_search_user_todos(
    user_id: str,
    data: TodoSearch,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    get_user_for(db, admin, user_id)
    return search_todos(db, data, user_id=user_id)


@router.get("/admin/users/{user_id}/todos/{todo_id}", response_model=TodoResponse)
def admin_get_user_todo(
    user_id: str,
    todo_id: str,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    return TodoResponse.model_validate(get_todo_for(db, admin, todo_id, user_id=user_id))


@router.put("/admin/users/{user_id}/todos/{todo_id}", response_model=TodoResponse)
def admin_update_user_todo(
    user_id: str,
    todo_id: str,
    data: TodoUpdate,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    todo = get_todo_for(db, admin, todo_id, user_id=user_id)
    return TodoResponse.model_validate(update_todo(db, todo, data))


@router.delete("/admin/users/{user_id}/todos/{todo_id}", status_code=204)
def admin_delete_user_todo(
    user_id: str,
    todo_id: str,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    delete_todo(db, get_todo_for(db, admin, todo_id, user_id=user_id))
    return Response(status_code=204)
