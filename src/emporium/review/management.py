"""Review submission and removal: commands and handler.

A review can be deleted by its author, or by an admin moderating the catalogue.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from emporium.account.access import require_admin, require_owner
from emporium.catalogue.lookup import require_product
from emporium.domain import emporium
from emporium.review.review import MAX_RATING, MIN_RATING, Review
from emporium.shared.errors import PermissionDenied

logger = structlog.get_logger(__name__)


@emporium.command(part_of="Review")
class SubmitReview:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True, min_value=MIN_RATING, max_value=MAX_RATING)
    comment: Text()


@emporium.command(part_of="Review")
class DeleteReview:
    requested_by: Identifier(required=True)
    review_id: Identifier(required=True)


@emporium.command_handler(part_of=Review)
class ManageReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        require_product(command.product_id)

        review = Review.submit(
            owner_id=command.owner_id,
            product_id=command.product_id,
            rating=command.rating,
            comment=command.comment,
        )
        current_domain.repository_for(Review).add(review)
        return str(review.id)

    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        try:
            require_owner(review, command.requested_by, "reviews")
        except PermissionDenied:
            require_admin(command.requested_by, "delete other customers' reviews")

        repo._dao.delete(review)
        logger.info("Review deleted", review_id=str(command.review_id), deleted_by=str(command.requested_by))
