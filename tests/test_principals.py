"""
Tests for token verification against the credential store.
"""

import uuid

import pytest

from todolist.exceptions import PrincipalNotFound, RoleMismatch
from todolist.models import Admin, Guest, PrincipalRole, User
from todolist.models.principal import utcnow
from todolist.services.passwords import hash_password
from todolist.services.principals import get_active_principal, resolve_principal_token, verify_principal_token
from todolist.services.tokens import issue_token_pair


@pytest.fixture
def stored_user(db) -> User:
    user = User(email="carol@example.com", password_hash=hash_password("pw"))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


class TestVerifyPrincipalToken:

    def test_active_principal(self, db, settings, stored_user):
        pair = issue_token_pair(stored_user.id, PrincipalRole.user, settings)
        payload = verify_principal_token(db, pair.access, settings, PrincipalRole.user)
        assert payload.id == stored_user.id
        assert payload.type == PrincipalRole.user
        # only id and type are exposed
        assert set(payload.model_dump()) == {"id", "type"}

    def test_soft_deleted_principal_rejected(self, db, settings, stored_user):
        """A still-valid token for a soft-deleted user fails."""
        pair = issue_token_pair(stored_user.id, PrincipalRole.user, settings)
        stored_user.deleted_at = utcnow()
        db.commit()
        with pytest.raises(PrincipalNotFound):
            verify_principal_token(db, pair.access, settings, PrincipalRole.user)

    def test_unknown_principal_rejected(self, db, settings):
        pair = issue_token_pair(str(uuid.uuid4()), PrincipalRole.admin, settings)
        with pytest.raises(PrincipalNotFound):
            verify_principal_token(db, pair.access, settings, PrincipalRole.admin)

    def test_same_id_other_table(self, db, settings, stored_user):
        """A user id signed as an admin does not match any admin row."""
        pair = issue_token_pair(stored_user.id, PrincipalRole.admin, settings)
        with pytest.raises(PrincipalNotFound):
            verify_principal_token(db, pair.access, settings, PrincipalRole.admin)

    def test_role_checked_before_lookup(self, db, settings, stored_user):
        pair = issue_token_pair(stored_user.id, PrincipalRole.user, settings)
        with pytest.raises(RoleMismatch):
            verify_principal_token(db, pair.access, settings, PrincipalRole.admin)

    def test_refresh_token(self, db, settings):
        guest = Guest()
        db.add(guest)
        db.commit()
        pair = issue_token_pair(guest.id, PrincipalRole.guest, settings)
        payload = verify_principal_token(db, pair.refresh, settings, PrincipalRole.guest, refresh=True)
        assert payload.id == guest.id


class TestGetActivePrincipal:

    def test_lookup_per_role(self, db):
        admin = Admin(email="root@example.com", password_hash=hash_password("pw"))
        guest = Guest()
        db.add_all([admin, guest])
        db.commit()
        assert get_active_principal(db, PrincipalRole.admin, admin.id).id == admin.id
        assert get_active_principal(db, PrincipalRole.guest, guest.id).id == guest.id
        assert get_active_principal(db, PrincipalRole.user, admin.id) is None


class TestResolvePrincipalToken:

    def test_returns_payload_and_row(self, db, settings, stored_user):
        pair = issue_token_pair(stored_user.id, PrincipalRole.user, settings)
        payload, principal = resolve_principal_token(db, pair.refresh, settings, PrincipalRole.user, refresh=True)
        assert payload.id == stored_user.id
        assert principal.id == stored_user.id
        assert principal.email == stored_user.email

    def test_soft_deleted_row_rejected(self, db, settings, stored_user):
        pair = issue_token_pair(stored_user.id, PrincipalRole.user, settings)
        stored_user.deleted_at = utcnow()
        db.commit()
        with pytest.raises(PrincipalNotFound):
            resolve_principal_token(db, pair.refresh, settings, PrincipalRole.user, refresh=True)
