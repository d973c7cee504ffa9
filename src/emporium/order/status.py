"""Order status changes: admin-only command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from emporium.account.access import require_admin
from emporium.domain import emporium
from emporium.order.order import Order

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Order")
class UpdateOrderStatus:
    requested_by: Identifier(required=True)
    order_id: Identifier(required=True)
    status: String(max_length=20)


@emporium.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        require_admin(command.requested_by, "update order status")

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_status(command.status, changed_by=command.requested_by)
        repo.add(order)

        logger.info("Order status changed", order_id=str(order.id), status=order.status)
