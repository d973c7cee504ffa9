"""Access errors raised by the storefront.

Field and state problems use Protean's `ValidationError` and missing records
use `ObjectNotFoundError`. The two classes here cover the cases Protean has no
vocabulary for: a caller without valid credentials and an authenticated
caller acting outside their role or ownership.
"""


class AccessError(Exception):
    """Base class for authentication and authorization failures."""

    def __init__(self, messages):
        self.messages = messages
        super().__init__(messages)


class NotAuthenticated(AccessError):
    """The request carries no credential, or one that fails verification."""


class PermissionDenied(AccessError):
    """The caller is known but lacks the role or ownership the action needs."""
