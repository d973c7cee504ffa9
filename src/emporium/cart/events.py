"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer

from emporium.domain import emporium


@emporium.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart, or its quantity increased."""

    __version__ = 1

    cart_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    unit_price: Float(required=True)
    total: Float(required=True)


@emporium.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A product was taken out of the cart."""

    __version__ = 1

    cart_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
    total: Float(required=True)


@emporium.event(part_of="ShoppingCart")
class CartCleared:
    """Every item was removed from the cart."""

    __version__ = 1

    cart_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    removed_count: Integer(required=True)
