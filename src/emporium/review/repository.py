"""Repository for the Review aggregate."""

from emporium.domain import emporium
from emporium.review.review import Review

MAX_RESULTS = 1000


@emporium.repository(part_of=Review)
class ReviewRepository:
    def for_product(self, product_id) -> list[Review]:
        return (
            self._dao.query.filter(product_id=str(product_id)).order_by("-created_at").limit(MAX_RESULTS).all().items
        )
