"""Account aggregate root with the Address entity.

An Account is a registered shopper or administrator. It owns a short address
book: at most two addresses, where slot 0 is the home address and slot 1 the
work address.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Integer, String

from emporium.account.events import AccountRegistered, AddressAdded, AddressEdited, AddressesCleared
from emporium.domain import emporium

MAX_ADDRESSES = 2

HOME_SLOT = 0
WORK_SLOT = 1

_EMAIL_PATTERN = re.compile(r"^[^@\s;,<>()\"\\]+@[^@\s;,<>()\"\\]+\.[^@\s;,<>()\"\\]+$")
_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")

# Address fields a caller may overwrite
ADDRESS_FIELDS = ("street", "city", "state", "country", "zip_code", "is_default")


class Role(Enum):
    """Closed set of account roles."""

    ADMIN = "admin"
    CUSTOMER = "customer"


@emporium.entity(part_of="Account")
class Address:
    """A postal address held in one of the account's two address slots."""

    slot: Integer(required=True, min_value=0, max_value=MAX_ADDRESSES - 1)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    country: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@emporium.aggregate
class Account:
    """A person who can sign in to the storefront.

    Email and phone number identify an account uniquely. The password is only
    ever stored hashed.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password: String(required=True, max_length=255)
    phone_number: String(required=True, max_length=20, unique=True)
    addresses: HasMany(Address)
    role: String(choices=Role, default=Role.CUSTOMER.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def phone_number_must_be_well_formed(self):
        number = self.phone_number
        if number and (not re.search(r"\d", number) or not _PHONE_PATTERN.match(number)):
            raise ValidationError({"phone_number": [f"Invalid phone number: {number!r}"]})

    @invariant.post
    def addresses_cannot_exceed_maximum(self):
        if len(self.addresses) > MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Maximum of {MAX_ADDRESSES} addresses allowed"]})

    @invariant.post
    def address_slots_are_unique(self):
        slots = [a.slot for a in self.addresses]
        if len(slots) != len(set(slots)):
            raise ValidationError({"addresses": ["Each address slot can hold only one address"]})

    @property
    def is_admin(self) -> bool:
        match Role(self.role):
            case Role.ADMIN:
                return True
            case Role.CUSTOMER:
                return False

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def register(cls, first_name, last_name, email, password_hash, phone_number, role=None):
        now = datetime.now(UTC)
        account = cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password_hash,
            phone_number=phone_number,
            role=role or Role.CUSTOMER.value,
            created_at=now,
            updated_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                email=email,
                first_name=first_name,
                last_name=last_name,
                role=account.role,
                registered_at=now,
            )
        )
        return account

    def address_in_slot(self, slot):
        return next((a for a in self.addresses if a.slot == slot), None)

    def add_address(self, street, city, country, zip_code, state=None, is_default=False):
        """Append an address to the next free slot."""
        if len(self.addresses) >= MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Maximum of {MAX_ADDRESSES} addresses allowed"]})

        slot = len(self.addresses)
        address = Address(
            slot=slot,
            street=street,
            city=city,
            state=state,
            country=country,
            zip_code=zip_code,
            is_default=bool(is_default),
        )
        self.add_addresses(address)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            AddressAdded(
                account_id=self.id,
                address_id=address.id,
                slot=slot,
                street=street,
                city=city,
                state=state,
                country=country,
                zip_code=zip_code,
            )
        )
        return address

    def edit_address(self, slot, **fields):
        """Overwrite the fields of the address in `slot`.

        Returns False, changing nothing, when the slot is empty.
        """
        address = self.address_in_slot(slot)
        if address is None:
            return False

        unknown = set(fields) - set(ADDRESS_FIELDS)
        if unknown:
            raise ValidationError({field: ["Not an address field"] for field in sorted(unknown)})

        with atomic_change(self):
            for field, value in fields.items():
                setattr(address, field, value)
            self.updated_at = datetime.now(UTC)

        self.raise_(
            AddressEdited(
                account_id=self.id,
                address_id=address.id,
                slot=slot,
            )
        )
        return True

    def clear_addresses(self):
        removed = len(self.addresses)
        for address in list(self.addresses):
            self.remove_addresses(address)
        self.updated_at = datetime.now(UTC)

        self.raise_(AddressesCleared(account_id=self.id, removed_count=removed))
