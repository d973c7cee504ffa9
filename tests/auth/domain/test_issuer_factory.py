"""Tests for the credential issuer factory."""

import pytest

from emporium.auth import get_issuer, reset_issuer, set_issuer
from emporium.auth.hmac_adapter import HmacCredentialIssuer
from emporium.auth.port import Claims, CredentialIssuer


class _FixedIssuer(CredentialIssuer):
    def issue(self, identity, claims):
        return f"token-for-{identity}"

    def verify(self, token):
        return Claims(identity=token.removeprefix("token-for-"), email="")


class TestIssuerFactory:
    def test_default_is_hmac(self):
        assert isinstance(get_issuer(), HmacCredentialIssuer)

    def test_default_is_reused(self):
        assert get_issuer() is get_issuer()

    def test_override_and_reset(self):
        set_issuer(_FixedIssuer())
        assert get_issuer().issue("acct-001", {}) == "token-for-acct-001"

        reset_issuer()
        assert isinstance(get_issuer(), HmacCredentialIssuer)

    def test_ttl_from_environment(self, monkeypatch):
        monkeypatch.setenv("EMPORIUM_TOKEN_TTL_MINUTES", "5")
        reset_issuer()
        assert get_issuer().ttl_seconds == 300

    def test_production_requires_secret_key(self, monkeypatch):
        monkeypatch.delenv("EMPORIUM_SECRET_KEY", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "production")
        reset_issuer()
        with pytest.raises(RuntimeError):
            get_issuer()
