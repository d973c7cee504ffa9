"""Credential issuer factory.

Provides get_issuer() / set_issuer() to swap implementations. The default
is an HMAC issuer keyed by EMPORIUM_SECRET_KEY.
"""

import os

from emporium.auth.hmac_adapter import HmacCredentialIssuer
from emporium.auth.port import CredentialIssuer

# Used only when EMPORIUM_SECRET_KEY is unset outside production
_DEVELOPMENT_KEY = "emporium-development-key"

_current_issuer: CredentialIssuer | None = None


def _build_default_issuer() -> CredentialIssuer:
    secret_key = os.environ.get("EMPORIUM_SECRET_KEY")
    if not secret_key:
        if os.environ.get("PROTEAN_ENV") == "production":
            raise RuntimeError("EMPORIUM_SECRET_KEY must be set in production")
        secret_key = _DEVELOPMENT_KEY

    ttl_minutes = int(os.environ.get("EMPORIUM_TOKEN_TTL_MINUTES", 24 * 60))
    return HmacCredentialIssuer(secret_key=secret_key, ttl_seconds=ttl_minutes * 60)


def get_issuer() -> CredentialIssuer:
    """Return the current credential issuer, building the default on first use."""
    global _current_issuer
    if _current_issuer is None:
        _current_issuer = _build_default_issuer()
    return _current_issuer


def set_issuer(issuer: CredentialIssuer) -> None:
    """Override the active credential issuer (useful for tests)."""
    global _current_issuer
    _current_issuer = issuer


def reset_issuer() -> None:
    global _current_issuer
    _current_issuer = None
