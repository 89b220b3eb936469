"""User accounts: admins search and manage, users read and edit themselves."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.dependencies import require_admin, require_user
from todolist.exceptions import DuplicateEmail
from todolist.models import PrincipalRole, User
from todolist.models.principal import utcnow
from todolist.schemas.auth import PrincipalPayload
from todolist.schemas.pagination import Page
from todolist.schemas.user import UserResponse, UserSearch, UserUpdate
from todolist.services.auth import commit_account, email_taken
from todolist.services.ownership import get_user_for
from todolist.services.pagination import paginate
from todolist.services.passwords import hash_password

router = APIRouter(prefix="/todoList", tags=["users"])


def _apply_update(db: Session, user: User, data: UserUpdate) -> UserResponse:
    if data.email is not None and data.email != user.email:
        if email_taken(db, PrincipalRole.user, data.email, exclude_id=user.id):
            raise DuplicateEmail(data.email)
        user.email = data.email
    if data.password is not None:
        user.password_hash = hash_password(data.password)
    commit_account(db, user)
    return UserResponse.model_validate(user)


@router.get("/user/users/{user_id}", response_model=UserResponse)
def get_me(user_id: str, db: Session = Depends(get_db), user: PrincipalPayload = Depends(require_user)):
    return UserResponse.model_validate(get_user_for(db, user, user_id))


@router.put("/user/users/{user_id}", response_model=UserResponse)
def update_me(
    user_id: str,
    data: UserUpdate,
    db: Session = Depends(get_db),
    user: PrincipalPayload = Depends(require_user),
):
    return _apply_update(db, get_user_for(db, user, user_id), data)


@router.patch("/admin/users", response_model=Page[UserResponse])
def search_users(
    data: UserSearch,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    q = db.query(User).filter(User.deleted_at.is_(None))
    if data.email_contains:
        q = q.filter(User.email.contains(data.email_contains, autoescape=True))
    if data.created_after is not None:
        q = q.filter(User.created_at >= data.created_after)
    if data.created_before is not None:
        q = q.filter(User.created_at <= data.created_before)
    column = getattr(User, data.sort_by)
    q = q.order_by(column.asc() if data.sort_direction == "asc" else column.desc(), User.id)
    rows, pagination = paginate(q, data.page, data.limit)
    return Page[UserResponse](pagination=pagination, data=[UserResponse.model_validate(u) for u in rows])


@router.get("/admin/users/{user_id}", response_model=UserResponse)
def admin_get_user(user_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    return UserResponse.model_validate(get_user_for(db, admin, user_id))


@router.put("/admin/users/{user_id}", response_model=UserResponse)
def admin_update_user(
    user_id: str,
    data: UserUpdate,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    return _apply_update(db, get_user_for(db, admin, user_id), data)


@router.delete("/admin/users/{user_id}", status_code=204)
def admin_delete_user(user_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    """Soft delete. Outstanding tokens for this user stop working immediately."""
    user = get_user_for(db, admin, user_id)
    now = utcnow()
    user.deleted_at = now
    user.updated_at = now
    db.commit()
    return Response(status_code=204)
