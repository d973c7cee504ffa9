"""Catalogue existence checks used by other aggregates' handlers."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from emporium.catalogue.product import Product


def require_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError({"product_id": [f"Product {product_id} not found"]}) from None
