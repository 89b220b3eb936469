"""Join, login and refresh for guests, users and admins."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from todolist.config import Settings, get_settings
from todolist.database import get_db
from todolist.models import Admin, Guest, PrincipalRole, User
from todolist.schemas.auth import (
    AccountAuthorized,
    AuthorizationToken,
    GuestAuthorized,
    JoinRequest,
    LoginRequest,
    RefreshRequest,
)
from todolist.services.auth import join_account, join_guest, login_account, refresh_principal

router = APIRouter(prefix="/auth", tags=["auth"])


def _guest_authorized(guest: Guest, token: AuthorizationToken) -> GuestAuthorized:
    return GuestAuthorized(
        id=guest.id,
        created_at=guest.created_at,
        updated_at=guest.updated_at,
        deleted_at=guest.deleted_at,
        token=token,
    )


def _account_authorized(account: User | Admin, token: AuthorizationToken) -> AccountAuthorized:
    return AccountAuthorized(
        id=account.id,
        email=account.email,
        created_at=account.created_at,
        updated_at=account.updated_at,
        token=token,
    )


@router.post("/guest/join", response_model=GuestAuthorized, status_code=201)
def guest_join(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return _guest_authorized(*join_guest(db, settings))


@router.post("/guest/refresh", response_model=GuestAuthorized)
def guest_refresh(
    data: RefreshRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return _guest_authorized(*refresh_principal(db, PrincipalRole.guest, data.refresh_token, settings))


@router.post("/user/join", response_model=AccountAuthorized, status_code=201)
def user_join(data: JoinRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return _account_authorized(*join_account(db, PrincipalRole.user, data.email, data.password, settings))


@router.post("/user/login", response_model=AccountAuthorized)
def user_login(data: LoginRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return _account_authorized(*login_account(db, PrincipalRole.user, data.email, data.password, settings))


@router.post("/user/refresh", response_model=AccountAuthorized)
def user_refresh(
    data: RefreshRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return _account_authorized(*refresh_principal(db, PrincipalRole.user, data.refresh_token, settings))


@router.post("/admin/join", response_model=AccountAuthorized, status_code=201)
def admin_join(data: JoinRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return _account_authorized(*join_account(db, PrincipalRole.admin, data.email, data.password, settings))


@router.post("/admin/login", response_model=AccountAuthorized)
def admin_login(data: LoginRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return _account_authorized(*login_account(db, PrincipalRole.admin, data.email, data.password, settings))


@router.post("/admin/refresh", response_model=AccountAuthorized)
def admin_refresh(
    data: RefreshRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return _account_authorized(*refresh_principal(db, PrincipalRole.admin, data.refresh_token, settings))
