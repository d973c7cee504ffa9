"""Repository for the ShoppingCart aggregate."""

from emporium.cart.cart import ShoppingCart
from emporium.domain import emporium


@emporium.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_owner(self, owner_id) -> ShoppingCart | None:
        results = self._dao.query.filter(owner_id=str(owner_id)).all()
        return results.items[0] if results.items else None
