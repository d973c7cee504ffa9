"""Repository for the Order aggregate."""

from emporium.domain import emporium
from emporium.order.order import Order

MAX_RESULTS = 1000


@emporium.repository(part_of=Order)
class OrderRepository:
    def for_owner(self, owner_id) -> list[Order]:
        return (
            self._dao.query.filter(owner_id=str(owner_id)).order_by("-ordered_at").limit(MAX_RESULTS).all().items
        )

    def owned(self, order_id, owner_id) -> Order | None:
        """The order with `order_id`, only if it belongs to `owner_id`."""
        results = self._dao.query.filter(id=str(order_id), owner_id=str(owner_id)).all()
        return results.items[0] if results.items else None
