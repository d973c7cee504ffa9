"""Cart item management: commands and handler.

Callers go through `emporium.shared.locks.process_exclusively` so concurrent
additions for one account accumulate instead of overwriting each other.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain

from emporium.cart.cart import ShoppingCart
from emporium.domain import emporium

logger = structlog.get_logger(__name__)


@emporium.command(part_of="ShoppingCart")
class AddToCart:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.0)


@emporium.command(part_of="ShoppingCart")
class RemoveFromCart:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)


@emporium.command(part_of="ShoppingCart")
class ClearCart:
    owner_id: Identifier(required=True)


def _cart_of(repo, owner_id) -> ShoppingCart:
    cart = repo.for_owner(owner_id)
    if cart is None:
        raise ObjectNotFoundError({"cart": ["Cart not found"]})
    return cart


@emporium.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)

        cart = repo.for_owner(command.owner_id)
        if cart is None:
            cart = ShoppingCart.create(owner_id=command.owner_id)
            logger.info("Cart created", owner_id=str(command.owner_id), cart_id=str(cart.id))

        cart.add_item(
            product_id=command.product_id,
            quantity=command.quantity,
            unit_price=command.unit_price,
        )
        repo.add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = _cart_of(repo, command.owner_id)
        cart.remove_item(command.product_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = _cart_of(repo, command.owner_id)
        cart.clear()
        repo.add(cart)
