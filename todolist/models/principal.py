"""Role tags shared by every principal kind and the tokens issued to them."""
import enum
import uuid
from datetime import datetime, timezone


class PrincipalRole(str, enum.Enum):
    guest = "guest"
    user = "user"
    admin = "admin"


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
