"""Auth schemas: join/login/refresh bodies, token envelope, verified principal payload."""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator
from todolist.models.principal import PrincipalRole

PASSWORD_MAX_LENGTH = 128


class AuthorizationToken(BaseModel):
    access: str
    refresh: str
    expired_at: str
    refreshable_until: str


class PrincipalPayload(BaseModel):
    """What a verified token proves: the principal's id and role tag. Nothing sensitive."""
    id: str
    type: PrincipalRole


class JoinRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password is required")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)


class RefreshRequest(BaseModel):
    # Older clients send refreshToken
    refresh_token: str = Field(
        min_length=1,
        validation_alias=AliasChoices("refresh_token", "refreshToken"),
    )


class GuestAuthorized(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
    token: AuthorizationToken


class AccountAuthorized(BaseModel):
    """User or admin auth response. Never carries the password hash."""
    id: str
    email: str
    created_at: datetime
    updated_at: datetime
    token: AuthorizationToken
