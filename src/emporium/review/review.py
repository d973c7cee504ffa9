"""Review aggregate: a 1-5 star rating of a product with an optional comment."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, Text

from emporium.domain import emporium
from emporium.review.events import ReviewSubmitted

MIN_RATING = 1
MAX_RATING = 5


@emporium.aggregate
class Review:
    owner_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True, min_value=MIN_RATING, max_value=MAX_RATING)
    comment: Text()
    created_at: DateTime()

    @classmethod
    def submit(cls, owner_id, product_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            owner_id=owner_id,
            product_id=product_id,
            rating=rating,
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                owner_id=owner_id,
                rating=rating,
                submitted_at=now,
            )
        )
        return review
