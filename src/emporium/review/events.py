"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from emporium.domain import emporium


@emporium.event(part_of="Review")
class ReviewSubmitted:
    """A customer rated a product."""

    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    rating: Integer(required=True)
    submitted_at: DateTime(required=True)
