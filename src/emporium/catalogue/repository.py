"""Repository for the Product aggregate."""

from emporium.catalogue.product import Product
from emporium.domain import emporium

# Upper bound on a single catalogue read
MAX_RESULTS = 1000


@emporium.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("name").limit(MAX_RESULTS).all().items

    def search(self, category: str | None = None, name: str | None = None) -> list[Product]:
        """Products whose category and/or name contain the given text, ignoring case.

        Both criteria must match when both are given.
        """
        filters = {}
        if category:
            filters["category__icontains"] = category
        if name:
            filters["name__icontains"] = name

        return self._dao.query.filter(**filters).order_by("name").limit(MAX_RESULTS).all().items
