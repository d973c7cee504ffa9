"""Tests for password hashing."""

from emporium.auth.passwords import ALGORITHM, hash_password, verify_password


class TestHashPassword:
    def test_hash_is_self_describing(self):
        algorithm, iterations, salt, digest = hash_password("s3cret-pass").split("$")
        assert algorithm == ALGORITHM
        assert int(iterations) > 0
        assert salt and digest

    def test_same_password_hashes_differently(self):
        assert hash_password("s3cret-pass") != hash_password("s3cret-pass")

    def test_iterations_follow_environment(self, monkeypatch):
        monkeypatch.setenv("EMPORIUM_PASSWORD_ITERATIONS", "1234")
        assert hash_password("s3cret-pass").split("$")[1] == "1234"


class TestVerifyPassword:
    def test_correct_password_matches(self):
        assert verify_password("s3cret-pass", hash_password("s3cret-pass"))

    def test_wrong_password_does_not_match(self):
        assert not verify_password("S3cret-pass", hash_password("s3cret-pass"))

    def test_hash_with_other_work_factor_still_verifies(self, monkeypatch):
        monkeypatch.setenv("EMPORIUM_PASSWORD_ITERATIONS", "2000")
        encoded = hash_password("s3cret-pass")
        monkeypatch.setenv("EMPORIUM_PASSWORD_ITERATIONS", "3000")
        assert verify_password("s3cret-pass", encoded)

    def test_malformed_hash_never_matches(self):
        assert not verify_password("s3cret-pass", "plaintext")
        assert not verify_password("s3cret-pass", "md5$1$abc$def")
        assert not verify_password("s3cret-pass", "pbkdf2_sha256$many$abc$def")
