"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from emporium.domain import emporium


@emporium.event(part_of="Order")
class OrderPlaced:
    """An order was placed."""

    __version__ = 1

    order_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    item_count: Integer(required=True)
    total_price: Float(required=True)
    payment_method: String(required=True)
    ordered_at: DateTime(required=True)


@emporium.event(part_of="Order")
class OrderStatusChanged:
    """An administrator moved an order to a new status."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_by: Identifier(required=True)


@emporium.event(part_of="Order")
class OrderPaymentRecorded:
    """The outcome of the order's payment was recorded."""

    __version__ = 1

    order_id: Identifier(required=True)
    transaction_id: String(required=True)
    payment_status: String(required=True)
