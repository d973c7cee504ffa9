"""Order aggregate (CQRS) with OrderItem snapshots.

An order captures the name, quantity and price of each product at checkout.
Its total is the sum of the item subtotals unless the caller supplied a
non-zero total, which is then kept as given.

Status can be set to any member of `OrderStatus` in any order; transitions are
not required to move forward.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from emporium.domain import emporium
from emporium.order.events import OrderPaymentRecorded, OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PROCESSING = "Processing"
    SHIPPING = "Shipping"
    DELIVERED = "Delivered"


class PaymentStatus(Enum):
    PENDING = "Pending"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@emporium.entity(part_of="Order")
class OrderItem:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.0)


@emporium.aggregate
class Order:
    owner_id: Identifier(required=True)
    items: HasMany(OrderItem)
    total_price: Float(min_value=0.0, default=0.0)
    discount: Float(min_value=0.0)
    ordered_at: DateTime()
    payment_method: String(required=True, max_length=50)
    status: String(choices=OrderStatus, default=OrderStatus.PROCESSING.value)
    transaction_id: String(max_length=255)
    payment_status: String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)

    @classmethod
    def place(cls, owner_id, items, payment_method, discount=None, total_price=None):
        """Create an order from a list of item dicts.

        Each item carries `product_id`, `quantity`, `unit_price` and optionally `name`.
        """
        if not items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        for item in items:
            quantity = item.get("quantity")
            if not isinstance(quantity, int) or quantity <= 0:
                product_id = item.get("product_id")
                raise ValidationError({"items": [f"Quantity must be greater than zero for product {product_id}"]})

        order_items = [
            OrderItem(
                product_id=item.get("product_id"),
                name=item.get("name"),
                quantity=item["quantity"],
                unit_price=item.get("unit_price"),
            )
            for item in items
        ]
        computed = sum(item.unit_price * item.quantity for item in order_items)
        now = datetime.now(UTC)

        order = cls(
            owner_id=owner_id,
            items=order_items,
            total_price=total_price if total_price else computed,
            discount=discount,
            ordered_at=now,
            payment_method=payment_method,
            status=OrderStatus.PROCESSING.value,
            payment_status=PaymentStatus.PENDING.value,
        )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                owner_id=owner_id,
                item_count=len(items),
                total_price=order.total_price,
                payment_method=payment_method,
                ordered_at=now,
            )
        )
        return order

    def change_status(self, new_status, changed_by):
        allowed = [s.value for s in OrderStatus]
        if not new_status:
            raise ValidationError({"status": ["Status is required"]})
        if new_status not in allowed:
            raise ValidationError({"status": [f"Invalid status '{new_status}'. Allowed: {', '.join(allowed)}"]})

        previous = self.status
        self.status = new_status

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status,
                changed_by=changed_by,
            )
        )

    def record_payment(self, transaction_id, succeeded):
        if PaymentStatus(self.payment_status) != PaymentStatus.PENDING:
            raise ValidationError({"payment_status": [f"Payment already recorded as {self.payment_status}"]})
        if not transaction_id:
            raise ValidationError({"transaction_id": ["Transaction id is required"]})

        self.transaction_id = transaction_id
        self.payment_status = (PaymentStatus.SUCCEEDED if succeeded else PaymentStatus.FAILED).value

        self.raise_(
            OrderPaymentRecorded(
                order_id=self.id,
                transaction_id=transaction_id,
                payment_status=self.payment_status,
            )
        )
