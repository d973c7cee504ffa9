"""Credential issuer port (abstract interface).

The storefront only needs two capabilities from its token machinery: sign a
credential for an identity, and verify a presented credential back into its
claims. Adapters decide the wire format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Claims:
    """Verified contents of a credential."""

    identity: str
    email: str
    first_name: str = ""
    last_name: str = ""
    extra: dict = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class CredentialIssuer(ABC):
    """Abstract credential issuer interface."""

    @abstractmethod
    def issue(self, identity: str, claims: dict) -> str:
        """Return a signed credential binding `identity` to `claims`."""
        ...

    @abstractmethod
    def verify(self, token: str) -> Claims:
        """Return the claims carried by `token`.

        Raises `NotAuthenticated` when the token is malformed, tampered with
        or expired.
        """
        ...
