"""Wishlist aggregate: one per account, holding a set of product ids."""

import json
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Text

from emporium.domain import emporium
from emporium.wishlist.events import ProductUnwished, ProductWished


@emporium.aggregate
class Wishlist:
    owner_id: Identifier(required=True, unique=True)
    products: Text()  # JSON array of product ids, no duplicates
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, owner_id):
        now = datetime.now(UTC)
        return cls(owner_id=owner_id, products=json.dumps([]), created_at=now, updated_at=now)

    @property
    def product_ids(self) -> list[str]:
        return json.loads(self.products) if self.products else []

    def add_product(self, product_id):
        """Add a product id; adding one already present changes nothing."""
        product_ids = self.product_ids
        if str(product_id) in product_ids:
            return

        product_ids.append(str(product_id))
        self.products = json.dumps(product_ids)
        self.updated_at = datetime.now(UTC)

        self.raise_(ProductWished(wishlist_id=self.id, owner_id=self.owner_id, product_id=product_id))

    def remove_product(self, product_id):
        product_ids = self.product_ids
        if str(product_id) not in product_ids:
            raise ObjectNotFoundError({"product_id": [f"Product {product_id} is not in the wishlist"]})

        product_ids.remove(str(product_id))
        self.products = json.dumps(product_ids)
        self.updated_at = datetime.now(UTC)

        self.raise_(ProductUnwished(wishlist_id=self.id, owner_id=self.owner_id, product_id=product_id))
