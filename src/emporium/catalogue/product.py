"""Product aggregate root.

Products are flat documents: images are held as a JSON array of URLs and an
optional discount is stored alongside the price.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from emporium.catalogue.events import ProductAdded, ProductUpdated
from emporium.domain import emporium

# Fields an admin may overwrite through an update
EDITABLE_FIELDS = ("name", "description", "price", "stock_quantity", "category", "images", "discount")


def _images_json(images):
    if images is None:
        return json.dumps([])
    if isinstance(images, str):
        return images
    return json.dumps(list(images))


@emporium.aggregate
class Product:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(required=True, min_value=0)
    category: String(max_length=100)
    images: Text()  # JSON array of image URLs
    discount: Float(min_value=0.0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def images_must_be_a_list_of_urls(self):
        if not self.images:
            return

        try:
            urls = json.loads(self.images)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"images": ["Images must be valid JSON"]}) from None

        if not isinstance(urls, list) or not all(isinstance(url, str) for url in urls):
            raise ValidationError({"images": ["Images must be a list of URLs"]})

    @property
    def image_urls(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    @classmethod
    def add(cls, name, price, stock_quantity, description=None, category=None, images=None, discount=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
            category=category,
            images=_images_json(images),
            discount=discount,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                price=price,
                stock_quantity=stock_quantity,
                added_at=now,
            )
        )
        return product

    def update(self, **changes):
        """Overwrite only the fields supplied with a non-None value."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Not an editable product field"] for field in sorted(unknown)})

        changed = [field for field in EDITABLE_FIELDS if changes.get(field) is not None]
        if not changed:
            raise ValidationError({"product": ["No fields to update"]})

        for field in changed:
            value = changes[field]
            setattr(self, field, _images_json(value) if field == "images" else value)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=",".join(changed),
                updated_at=self.updated_at,
            )
        )
