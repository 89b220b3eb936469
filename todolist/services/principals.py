"""Principal lookup by role tag, and token verification against the credential store."""
import logging

from sqlalchemy.orm import Session

from todolist.config import Settings
from todolist.exceptions import PrincipalNotFound
from todolist.models import Admin, Guest, PrincipalRole, User
from todolist.schemas.auth import PrincipalPayload
from todolist.services.tokens import decode_token

log = logging.getLogger("uvicorn.error")

PRINCIPAL_MODELS = {
    PrincipalRole.guest: Guest,
    PrincipalRole.user: User,
    PrincipalRole.admin: Admin,
}


def get_active_principal(db: Session, role: PrincipalRole, principal_id: str):
    """Guest, User or Admin row for principal_id, or None if absent or soft-deleted."""
    model = PRINCIPAL_MODELS[PrincipalRole(role)]
    return db.query(model).filter(model.id == principal_id, model.deleted_at.is_(None)).first()


def resolve_principal_token(
    db: Session,
    token: str,
    settings: Settings,
    expected_role: PrincipalRole,
    *,
    refresh: bool = False,
):
    """
    Full verification: token checks, then a re-fetch of the principal.

    A cryptographically valid token is not enough. If the principal was deleted
    after the token was issued, PrincipalNotFound is raised. Returns the
    verified payload and the active Guest, User or Admin row.
    """
    payload = decode_token(token, settings, expected_role=expected_role, refresh=refresh)
    principal = get_active_principal(db, payload.type, payload.id)
    if principal is None:
        log.info("Token for missing or deleted %s %s rejected", payload.type.value, payload.id)
        raise PrincipalNotFound(f"{payload.type.value} not found")
    return payload, principal


def verify_principal_token(
    db: Session,
    token: str,
    settings: Settings,
    expected_role: PrincipalRole,
    *,
    refresh: bool = False,
) -> PrincipalPayload:
    """Verified {id, type} payload only; see resolve_principal_token."""
    payload, _ = resolve_principal_token(db, token, settings, expected_role, refresh=refresh)
    return payload
