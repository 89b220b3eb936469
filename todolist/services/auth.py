"""Join, login and refresh flows for every principal kind."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todolist.config import Settings
from todolist.exceptions import DuplicateEmail, InvalidCredentials, ValidationError
from todolist.models import Admin, Guest, PrincipalRole, User
from todolist.schemas.auth import AuthorizationToken
from todolist.services.passwords import hash_password, verify_password
from todolist.services.principals import PRINCIPAL_MODELS, resolve_principal_token
from todolist.services.tokens import issue_token_pair

log = logging.getLogger("uvicorn.error")

# Roles that sign in with email + password
ACCOUNT_ROLES = (PrincipalRole.user, PrincipalRole.admin)


def _account_model(role: PrincipalRole):
    role = PrincipalRole(role)
    if role not in ACCOUNT_ROLES:
        raise ValidationError(f"{role.value} accounts have no credentials")
    return PRINCIPAL_MODELS[role]


def email_taken(db: Session, role: PrincipalRole, email: str, exclude_id: str | None = None) -> bool:
    """Advisory check only; the partial unique index on email is authoritative."""
    model = _account_model(role)
    q = db.query(model.id).filter(model.email == email, model.deleted_at.is_(None))
    if exclude_id is not None:
        q = q.filter(model.id != exclude_id)
    return q.first() is not None


def commit_account(db: Session, account: User | Admin) -> None:
    """Commit a new or changed account. A unique-index violation on email becomes DuplicateEmail."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        msg = str(getattr(e, "orig", None) or e).lower()
        if "email" in msg or "unique" in msg:
            raise DuplicateEmail(account.email) from e
        raise
    db.refresh(account)


def join_guest(db: Session, settings: Settings) -> tuple[Guest, AuthorizationToken]:
    guest = Guest()
    db.add(guest)
    db.commit()
    db.refresh(guest)
    log.info("Guest joined: id=%s", guest.id)
    return guest, issue_token_pair(guest.id, PrincipalRole.guest, settings)


def join_account(
    db: Session,
    role: PrincipalRole,
    email: str,
    password: str,
    settings: Settings,
) -> tuple[User | Admin, AuthorizationToken]:
    model = _account_model(role)
    if email_taken(db, role, email):
        raise DuplicateEmail(email)
    account = model(email=email, password_hash=hash_password(password))
    db.add(account)
    commit_account(db, account)
    log.info("%s joined: id=%s", PrincipalRole(role).value.capitalize(), account.id)
    return account, issue_token_pair(account.id, role, settings)


def login_account(
    db: Session,
    role: PrincipalRole,
    email: str,
    password: str,
    settings: Settings,
) -> tuple[User | Admin, AuthorizationToken]:
    model = _account_model(role)
    account = db.query(model).filter(model.email == email, model.deleted_at.is_(None)).first()
    if not account or not verify_password(password, account.password_hash):
        log.info("Failed %s login for %s", PrincipalRole(role).value, email)
        raise InvalidCredentials()
    return account, issue_token_pair(account.id, role, settings)


def refresh_principal(
    db: Session,
    role: PrincipalRole,
    refresh_token: str,
    settings: Settings,
) -> tuple[Guest | User | Admin, AuthorizationToken]:
    """
    Mint a new pair from a refresh token.

    The presented refresh token is not revoked; it stays usable until its own
    exp. Tokens are not tracked server-side.
    """
    payload, principal = resolve_principal_token(db, refresh_token, settings, role, refresh=True)
    return principal, issue_token_pair(principal.id, payload.type, settings)
