"""Order placement: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from emporium.domain import emporium
from emporium.order.order import Order

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Order")
class PlaceOrder:
    """Place an order. A non-zero `total_price` is kept as given."""

    owner_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {product_id, name, quantity, unit_price}
    payment_method: String(required=True, max_length=50)
    discount: Float(min_value=0.0)
    total_price: Float(min_value=0.0)


@emporium.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(
            owner_id=command.owner_id,
            items=items,
            payment_method=command.payment_method,
            discount=command.discount,
            total_price=command.total_price,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            owner_id=str(command.owner_id),
            total_price=order.total_price,
        )
        return str(order.id)
