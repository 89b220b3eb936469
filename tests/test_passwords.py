"""
Tests for bcrypt password hashing.
"""

from todolist.services.passwords import hash_password, verify_password


class TestPasswordHashing:

    def test_round_trip(self):
        """A hash verifies against its own plaintext."""
        digest = hash_password("s3cret!")
        assert digest != "s3cret!"
        assert verify_password("s3cret!", digest) is True

    def test_other_plaintext_rejected(self):
        digest = hash_password("s3cret!")
        assert verify_password("s3cret?", digest) is False

    def test_salted(self):
        """Same plaintext hashes differently each time, both verify."""
        first = hash_password("same")
        second = hash_password("same")
        assert first != second
        assert verify_password("same", first)
        assert verify_password("same", second)

    def test_malformed_digest_returns_false(self):
        """verify_password never raises on garbage."""
        assert verify_password("anything", "not-a-bcrypt-hash") is False
        assert verify_password("anything", "") is False

    def test_unicode_password(self):
        digest = hash_password("pässwörd-日本")
        assert verify_password("pässwörd-日本", digest)
