"""Login: check a password and issue a signed credential."""

import structlog
from protean.utils.globals import current_domain

from emporium.account.account import Account
from emporium.auth import get_issuer
from emporium.auth.passwords import verify_password
from emporium.shared.errors import NotAuthenticated

logger = structlog.get_logger(__name__)


def authenticate(email: str, password: str) -> tuple[Account, str]:
    """Return the account behind `email` and a fresh credential for it.

    Unknown emails and wrong passwords fail identically.
    """
    account = current_domain.repository_for(Account).find_by_email(email)
    if account is None or not verify_password(password, account.password):
        logger.warning("Login rejected", email=email)
        raise NotAuthenticated({"credentials": ["Invalid email or password"]})

    token = get_issuer().issue(
        str(account.id),
        {
            "email": account.email,
            "first_name": account.first_name,
            "last_name": account.last_name,
        },
    )
    logger.info("Login succeeded", account_id=str(account.id))
    return account, token
