"""Request dependencies shared by the routers."""

from fastapi import Header

from emporium.auth import get_issuer
from emporium.shared.errors import NotAuthenticated
from emporium.utils.logging import add_context

_SCHEME = "bearer"


def current_identity(authorization: str | None = Header(None)) -> str:
    """Resolve the caller's account id from an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise NotAuthenticated({"authorization": ["Authorization header is missing"]})

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != _SCHEME or not token.strip():
        raise NotAuthenticated({"authorization": ["Expected a bearer token"]})

    claims = get_issuer().verify(token.strip())
    add_context(identity=claims.identity)
    return claims.identity
