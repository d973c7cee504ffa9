"""Wishlist management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from emporium.account.access import require_owner
from emporium.catalogue.lookup import require_product
from emporium.domain import emporium
from emporium.wishlist.wishlist import Wishlist

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Wishlist")
class AddToWishlist:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)


@emporium.command(part_of="Wishlist")
class RemoveFromWishlist:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)


@emporium.command(part_of="Wishlist")
class DeleteWishlist:
    requested_by: Identifier(required=True)
    wishlist_id: Identifier(required=True)


@emporium.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        require_product(command.product_id)

        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_owner(command.owner_id)
        if wishlist is None:
            wishlist = Wishlist.create(owner_id=command.owner_id)

        wishlist.add_product(command.product_id)
        repo.add(wishlist)
        return str(wishlist.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_owner(command.owner_id)
        if wishlist is None:
            raise ObjectNotFoundError({"wishlist": ["No wishlist found for this user"]})

        wishlist.remove_product(command.product_id)
        repo.add(wishlist)

    @handle(DeleteWishlist)
    def delete_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.get(command.wishlist_id)
        require_owner(wishlist, command.requested_by, "wishlist")

        repo._dao.delete(wishlist)
        logger.info("Wishlist deleted", wishlist_id=str(command.wishlist_id))
