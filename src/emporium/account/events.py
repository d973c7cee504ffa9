"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from emporium.domain import emporium


@emporium.event(part_of="Account")
class AccountRegistered:
    """A new account signed up."""

    __version__ = 1

    account_id: Identifier(required=True)
    email: String(required=True)
    first_name: String(required=True)
    last_name: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@emporium.event(part_of="Account")
class AddressAdded:
    """An address was stored in one of the account's slots."""

    __version__ = 1

    account_id: Identifier(required=True)
    address_id: Identifier(required=True)
    slot: Integer(required=True)
    street: String(required=True)
    city: String(required=True)
    state: String()
    country: String(required=True)
    zip_code: String(required=True)


@emporium.event(part_of="Account")
class AddressEdited:
    """The address in a slot was overwritten."""

    __version__ = 1

    account_id: Identifier(required=True)
    address_id: Identifier(required=True)
    slot: Integer(required=True)


@emporium.event(part_of="Account")
class AddressesCleared:
    """Every address on the account was removed."""

    __version__ = 1

    account_id: Identifier(required=True)
    removed_count: Integer(required=True)
