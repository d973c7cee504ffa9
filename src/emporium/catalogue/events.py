"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from emporium.domain import emporium


@emporium.event(part_of="Product")
class ProductAdded:
    """A product was listed in the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String()
    price: Float(required=True)
    stock_quantity: Integer(required=True)
    added_at: DateTime(required=True)


@emporium.event(part_of="Product")
class ProductUpdated:
    """Some of a product's fields were overwritten."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: String(required=True)  # comma separated
    updated_at: DateTime(required=True)
