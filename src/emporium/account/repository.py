"""Repository for the Account aggregate."""

from emporium.account.account import Account
from emporium.domain import emporium


@emporium.repository(part_of=Account)
class AccountRepository:
    def _first(self, **filters):
        results = self._dao.query.filter(**filters).all()
        return results.items[0] if results.items else None

    def find_by_email(self, email: str) -> Account | None:
        return self._first(email=email)

    def find_by_phone_number(self, phone_number: str) -> Account | None:
        return self._first(phone_number=phone_number)
