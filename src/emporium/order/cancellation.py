"""Order cancellation: command and handler.

Only the owner can cancel an order. An order that belongs to someone else is
reported as missing, the same as one that does not exist.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from emporium.domain import emporium
from emporium.order.order import Order

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Order")
class CancelOrder:
    owner_id: Identifier(required=True)
    order_id: Identifier(required=True)


@emporium.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.owned(command.order_id, command.owner_id)
        if order is None:
            raise ObjectNotFoundError({"order": ["Order not found"]})

        # Item lines are stored apart from the root and go first
        for item in list(order.items):
            order.remove_items(item)
        repo.add(order)
        repo._dao.delete(order)
        logger.info("Order cancelled", order_id=str(command.order_id), owner_id=str(command.owner_id))
