"""
JWT issuance and verification shared by guests, users and admins.

Access claims: {id, type, iss, iat, exp, jti}. Refresh tokens add
tokenType="refresh". Both are HS256-signed with the same secret and issuer and
differ only in payload shape and lifetime. Nothing is persisted; a token is
valid while its signature, issuer and exp check out.
"""
import uuid
from datetime import datetime, timedelta, timezone

import jwt

from todolist.config import Settings
from todolist.exceptions import InvalidSignature, RoleMismatch, TokenExpired
from todolist.models.principal import PrincipalRole
from todolist.schemas.auth import AuthorizationToken, PrincipalPayload

REFRESH_TOKEN_TYPE = "refresh"


def to_iso(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _encode(claims: dict, settings: Settings) -> str:
    raw = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return raw if isinstance(raw, str) else raw.decode("utf-8")


def issue_token_pair(
    principal_id: str,
    role: PrincipalRole,
    settings: Settings,
    now: datetime | None = None,
) -> AuthorizationToken:
    now = now or datetime.now(timezone.utc)
    access_expires = now + timedelta(minutes=settings.jwt_access_token_expire_minutes)
    refresh_expires = now + timedelta(days=settings.jwt_refresh_token_expire_days)

    base = {"id": str(principal_id), "type": PrincipalRole(role).value, "iss": settings.jwt_issuer, "iat": now}
    access = _encode({**base, "exp": access_expires, "jti": uuid.uuid4().hex}, settings)
    refresh = _encode(
        {**base, "tokenType": REFRESH_TOKEN_TYPE, "exp": refresh_expires, "jti": uuid.uuid4().hex},
        settings,
    )
    return AuthorizationToken(
        access=access,
        refresh=refresh,
        expired_at=to_iso(access_expires),
        refreshable_until=to_iso(refresh_expires),
    )


def decode_claims(token: str, settings: Settings) -> dict:
    """Signature, issuer and expiry checks only. Raises InvalidSignature or TokenExpired."""
    if not token or not isinstance(token, str):
        raise InvalidSignature("empty token")
    try:
        return jwt.decode(
            token.strip(),
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iss"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired(str(e)) from e
    except jwt.PyJWTError as e:
        raise InvalidSignature(str(e)) from e


def decode_token(
    token: str,
    settings: Settings,
    *,
    expected_role: PrincipalRole | None = None,
    refresh: bool = False,
) -> PrincipalPayload:
    """
    Validate a bearer token and return its typed payload.

    refresh selects which kind of token is acceptable: access tokens are
    rejected where a refresh token is expected, and the other way round.
    Does not touch the database; see principals.verify_principal_token.
    """
    claims = decode_claims(token, settings)

    is_refresh = claims.get("tokenType") == REFRESH_TOKEN_TYPE
    if is_refresh != refresh:
        raise InvalidSignature("wrong token kind")

    try:
        role = PrincipalRole(claims.get("type"))
    except ValueError:
        raise InvalidSignature("unknown principal type")
    try:
        principal_id = str(uuid.UUID(str(claims.get("id"))))
    except ValueError:
        raise InvalidSignature("invalid principal id")

    if expected_role is not None and role != PrincipalRole(expected_role):
        raise RoleMismatch(f"token type {role.value} where {PrincipalRole(expected_role).value} is required")
    return PrincipalPayload(id=principal_id, type=role)
