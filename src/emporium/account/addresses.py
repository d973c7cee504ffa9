"""Address book management: commands and handler.

The home address lives in slot 0 and the work address in slot 1. Editing a
slot that holds no address succeeds without changing anything.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from emporium.account.account import ADDRESS_FIELDS, HOME_SLOT, MAX_ADDRESSES, WORK_SLOT, Account
from emporium.domain import emporium

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Account")
class AddAddress:
    account_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    country: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@emporium.command(part_of="Account")
class EditHomeAddress:
    account_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    country: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@emporium.command(part_of="Account")
class EditWorkAddress:
    account_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    country: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@emporium.command(part_of="Account")
class DeleteAddresses:
    account_id: Identifier(required=True)


def _address_fields(command):
    return {field: getattr(command, field) for field in ADDRESS_FIELDS}


@emporium.command_handler(part_of=Account)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        if len(account.addresses) >= MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Maximum of {MAX_ADDRESSES} addresses allowed"]})

        address = account.add_address(**_address_fields(command))
        repo.add(account)
        return str(address.id)

    def _edit_slot(self, command, slot):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        if not account.edit_address(slot, **_address_fields(command)):
            logger.warning("Address slot is empty, nothing edited", account_id=str(account.id), slot=slot)
            return False

        repo.add(account)
        return True

    @handle(EditHomeAddress)
    def edit_home_address(self, command):
        return self._edit_slot(command, HOME_SLOT)

    @handle(EditWorkAddress)
    def edit_work_address(self, command):
        return self._edit_slot(command, WORK_SLOT)

    @handle(DeleteAddresses)
    def delete_addresses(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.clear_addresses()
        repo.add(account)
