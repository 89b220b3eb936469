"""Shared dependencies: DB session, settings, and the per-role authorization guard."""
import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from todolist.config import Settings, get_settings
from todolist.database import get_db
from todolist.exceptions import MissingToken, Unauthorized
from todolist.models.principal import PrincipalRole
from todolist.schemas.auth import PrincipalPayload
from todolist.services.principals import verify_principal_token

log = logging.getLogger("uvicorn.error")

security = HTTPBearer(auto_error=False)


def authorize(
    credentials: HTTPAuthorizationCredentials | None,
    role: PrincipalRole,
    db: Session,
    settings: Settings,
) -> PrincipalPayload:
    """
    Extract the bearer token and verify it for role.

    Ownership of individual resources is the route's job (services.ownership).
    Raises an Unauthorized subclass on any failure; nothing is retried.
    """
    token_str = (credentials.credentials or "").strip() if credentials else ""
    if not token_str:
        raise MissingToken("Not authenticated")
    try:
        return verify_principal_token(db, token_str, settings, role)
    except Unauthorized as e:
        log.debug("Rejected %s token: %s (%s)", role.value, e.code, e.message)
        raise


def _require(role: PrincipalRole):
    def dependency(
        db: Session = Depends(get_db),
        settings: Settings = Depends(get_settings),
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
    ) -> PrincipalPayload:
        return authorize(credentials, role, db, settings)

    dependency.__name__ = f"require_{role.value}"
    return dependency


require_guest = _require(PrincipalRole.guest)
require_user = _require(PrincipalRole.user)
require_admin = _require(PrincipalRole.admin)
