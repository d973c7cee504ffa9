"""HMAC-signed credential issuer.

Tokens are JWT-shaped: base64url(header).base64url(payload).base64url(signature)
with an HS256 signature over the first two segments. The payload carries the
identity in `sub`, the caller's email and names, and an `exp` timestamp.
"""

import base64
import hashlib
import hmac
import json
import time

from emporium.auth.port import Claims, CredentialIssuer
from emporium.shared.errors import NotAuthenticated

_HEADER = {"alg": "HS256", "typ": "JWT"}
_RESERVED = ("sub", "email", "first_name", "last_name", "iat", "exp")


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


class HmacCredentialIssuer(CredentialIssuer):
    def __init__(self, secret_key: str, ttl_seconds: int = 24 * 60 * 60, clock=time.time) -> None:
        if not secret_key:
            raise ValueError("A non-empty secret key is required to sign credentials")
        self._key = secret_key.encode("utf-8")
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def _sign(self, signing_input: str) -> str:
        digest = hmac.new(self._key, signing_input.encode("ascii"), hashlib.sha256).digest()
        return _b64encode(digest)

    def issue(self, identity: str, claims: dict) -> str:
        now = int(self._clock())
        payload = {**claims, "sub": str(identity), "iat": now, "exp": now + self.ttl_seconds}
        header_segment = _b64encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
        payload_segment = _b64encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
        signing_input = f"{header_segment}.{payload_segment}"
        return f"{signing_input}.{self._sign(signing_input)}"

    def verify(self, token: str) -> Claims:
        parts = token.split(".") if token else []
        if len(parts) != 3:
            raise NotAuthenticated({"token": ["Malformed credential"]})

        header_segment, payload_segment, signature = parts
        expected = self._sign(f"{header_segment}.{payload_segment}")
        if not hmac.compare_digest(signature.encode("utf-8"), expected.encode("ascii")):
            raise NotAuthenticated({"token": ["Credential signature mismatch"]})

        try:
            payload = json.loads(_b64decode(payload_segment))
        except (ValueError, UnicodeDecodeError):
            raise NotAuthenticated({"token": ["Malformed credential"]}) from None

        if not isinstance(payload, dict) or not payload.get("sub"):
            raise NotAuthenticated({"token": ["Credential carries no identity"]})
        if payload.get("exp", 0) < self._clock():
            raise NotAuthenticated({"token": ["Credential has expired"]})

        return Claims(
            identity=payload["sub"],
            email=payload.get("email", ""),
            first_name=payload.get("first_name", ""),
            last_name=payload.get("last_name", ""),
            extra={k: v for k, v in payload.items() if k not in _RESERVED},
        )
