"""Shopping Cart aggregate.

Each account owns at most one cart, created the first time a product is
added. Items are unique by product: adding a product already in the cart
increases its quantity and replaces its unit price with the latest one.
The running total always equals the sum of unit price times quantity.
"""

import math
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer

from emporium.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from emporium.domain import emporium


@emporium.entity(part_of="ShoppingCart")
class CartItem:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.0)
    added_at: DateTime()

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity


@emporium.aggregate
class ShoppingCart:
    owner_id: Identifier(required=True, unique=True)
    items: HasMany(CartItem)
    total: Float(default=0.0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def total_must_match_items(self):
        expected = sum(item.subtotal for item in self.items)
        if not math.isclose(self.total or 0.0, expected, abs_tol=1e-9):
            raise ValidationError({"total": [f"Cart total {self.total} does not match its items ({expected})"]})

    @invariant.post
    def products_must_be_unique(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    @classmethod
    def create(cls, owner_id):
        now = datetime.now(UTC)
        return cls(owner_id=owner_id, total=0.0, created_at=now, updated_at=now)

    def item_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _recompute_total(self):
        self.total = sum(item.subtotal for item in self.items)

    def add_item(self, product_id, quantity, unit_price):
        """Add `quantity` of a product at `unit_price`, merging with any existing line."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if unit_price is None or unit_price < 0:
            raise ValidationError({"unit_price": ["Unit price cannot be negative"]})

        now = datetime.now(UTC)
        existing = self.item_for(product_id)

        with atomic_change(self):
            if existing:
                existing.quantity += quantity
                existing.unit_price = unit_price
            else:
                self.add_items(
                    CartItem(
                        product_id=product_id,
                        quantity=quantity,
                        unit_price=unit_price,
                        added_at=now,
                    )
                )
            self._recompute_total()
            self.updated_at = now

        line = self.item_for(product_id)
        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                owner_id=self.owner_id,
                product_id=product_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total=self.total,
            )
        )

    def remove_item(self, product_id):
        item = self.item_for(product_id)
        if item is None:
            raise ObjectNotFoundError({"product_id": [f"Product {product_id} is not in the cart"]})

        with atomic_change(self):
            self.remove_items(item)
            self._recompute_total()
            self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=self.id,
                owner_id=self.owner_id,
                product_id=product_id,
                total=self.total,
            )
        )

    def clear(self):
        """Empty the cart, keeping the cart itself. Clearing an empty cart is allowed."""
        removed = len(self.items)

        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            self.total = 0.0
            self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=self.id, owner_id=self.owner_id, removed_count=removed))
