"""Catalogue management: admin-only commands and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from emporium.account.access import require_admin
from emporium.catalogue.product import EDITABLE_FIELDS, Product
from emporium.domain import emporium

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Product")
class AddProduct:
    requested_by: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(required=True, min_value=0)
    category: String(max_length=100)
    images: Text()  # JSON array of image URLs
    discount: Float(min_value=0.0)


@emporium.command(part_of="Product")
class UpdateProduct:
    """Overwrite the supplied fields of a product, leaving the rest untouched."""

    requested_by: Identifier(required=True)
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    stock_quantity: Integer(min_value=0)
    category: String(max_length=100)
    images: Text()
    discount: Float(min_value=0.0)


@emporium.command(part_of="Product")
class DeleteProduct:
    requested_by: Identifier(required=True)
    product_id: Identifier(required=True)


@emporium.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        require_admin(command.requested_by, "add products")

        product = Product.add(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
            category=command.category,
            images=command.images,
            discount=command.discount,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product added", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        require_admin(command.requested_by, "update products")

        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {field: getattr(command, field) for field in EDITABLE_FIELDS}
        product.update(**changes)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        require_admin(command.requested_by, "delete products")

        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)

        logger.info("Product deleted", product_id=str(command.product_id))
