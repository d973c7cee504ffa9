"""Payment outcome recording: admin-only command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from emporium.account.access import require_admin
from emporium.domain import emporium
from emporium.order.order import Order


@emporium.command(part_of="Order")
class RecordPayment:
    requested_by: Identifier(required=True)
    order_id: Identifier(required=True)
    transaction_id: String(required=True, max_length=255)
    succeeded: Boolean(required=True)


@emporium.command_handler(part_of=Order)
class RecordPaymentHandler:
    @handle(RecordPayment)
    def record_payment(self, command):
        require_admin(command.requested_by, "record payments")

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.record_payment(command.transaction_id, command.succeeded)
        repo.add(order)
