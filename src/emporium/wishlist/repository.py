"""Repository for the Wishlist aggregate."""

from emporium.domain import emporium
from emporium.wishlist.wishlist import Wishlist


@emporium.repository(part_of=Wishlist)
class WishlistRepository:
    def for_owner(self, owner_id) -> Wishlist | None:
        results = self._dao.query.filter(owner_id=str(owner_id)).all()
        return results.items[0] if results.items else None
