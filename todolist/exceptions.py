"""
Error taxonomy for the todo list backend.

Services raise these; the HTTP layer maps each to its status code in one
exception handler (see todolist.main). Every error is terminal for the request.
"""
from typing import Any, Optional


class TodoListError(Exception):
    """Base exception for all application errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TodoListError):
    """Malformed input; the caller must fix it and resubmit."""

    status_code = 400


class InvalidCredentials(TodoListError):
    """Login failed. Same error for an unknown email and a wrong password."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials", **kwargs):
        super().__init__(message, **kwargs)


class Unauthorized(TodoListError):
    """
    Token or principal rejected.

    Subclasses record which check failed for logs and tests. Clients only ever
    see the generic public form from public_dict().
    """

    status_code = 401

    def public_dict(self) -> dict[str, Any]:
        return {"error": "Unauthorized", "message": "Unauthorized", "details": {}}


class MissingToken(Unauthorized):
    pass


class InvalidSignature(Unauthorized):
    pass


class TokenExpired(Unauthorized):
    pass


class RoleMismatch(Unauthorized):
    pass


class PrincipalNotFound(Unauthorized):
    pass


class Forbidden(TodoListError):
    """Authenticated but not entitled to the resource."""

    status_code = 403


class NotFound(TodoListError):
    """Resource absent after authorization."""

    status_code = 404


class DuplicateEmail(TodoListError):
    status_code = 409

    def __init__(self, email: str, **kwargs):
        super().__init__("Email already registered", details={"email": email}, **kwargs)


class DuplicateTitle(TodoListError):
    status_code = 409

    def __init__(self, title: str, **kwargs):
        super().__init__("Title already exists for this user", details={"title": title}, **kwargs)
