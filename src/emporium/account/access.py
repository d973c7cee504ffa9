"""Role and ownership checks shared by command handlers."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from emporium.account.account import Account
from emporium.shared.errors import PermissionDenied


def require_admin(identity, action: str) -> Account:
    """Load the caller's Account and insist it carries the admin role.

    An identity with no Account behind it is treated as a non-admin.
    """
    try:
        account = current_domain.repository_for(Account).get(identity)
    except ObjectNotFoundError:
        account = None

    if account is None or not account.is_admin:
        raise PermissionDenied({"role": [f"You are not authorized to {action}"]})
    return account


def require_owner(record, identity, what: str) -> None:
    if str(record.owner_id) != str(identity):
        raise PermissionDenied({"owner": [f"You can only delete your own {what}"]})
