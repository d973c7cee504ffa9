"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier

from emporium.domain import emporium


@emporium.event(part_of="Wishlist")
class ProductWished:
    __version__ = 1

    wishlist_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)


@emporium.event(part_of="Wishlist")
class ProductUnwished:
    __version__ = 1

    wishlist_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
