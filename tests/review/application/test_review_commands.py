"""Application tests for review commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from emporium.review.management import DeleteReview, SubmitReview
from emporium.review.review import Review
from emporium.shared.errors import PermissionDenied


def _process(command):
    return current_domain.process(command, asynchronous=False)


class TestSubmitReview:
    def test_submit(self, customer_id, product_id):
        review_id = _process(SubmitReview(owner_id=customer_id, product_id=product_id, rating=5, comment="Great"))
        review = current_domain.repository_for(Review).get(review_id)
        assert review.rating == 5
        assert str(review.owner_id) == customer_id

    def test_rating_out_of_range(self, customer_id, product_id):
        with pytest.raises(ValidationError):
            _process(SubmitReview(owner_id=customer_id, product_id=product_id, rating=6))

    def test_unknown_product(self, customer_id):
        with pytest.raises(ObjectNotFoundError):
            _process(SubmitReview(owner_id=customer_id, product_id="missing", rating=3))

    def test_list_by_product(self, register_account, add_product):
        lamp, desk = add_product(name="Lamp"), add_product(name="Desk")
        _process(SubmitReview(owner_id=register_account(), product_id=lamp, rating=5))
        _process(SubmitReview(owner_id=register_account(), product_id=lamp, rating=2))
        _process(SubmitReview(owner_id=register_account(), product_id=desk, rating=4))

        reviews = current_domain.repository_for(Review).for_product(lamp)

        assert sorted(r.rating for r in reviews) == [2, 5]


class TestDeleteReview:
    def test_author_deletes(self, customer_id, product_id):
        review_id = _process(SubmitReview(owner_id=customer_id, product_id=product_id, rating=5))
        _process(DeleteReview(requested_by=customer_id, review_id=review_id))
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Review).get(review_id)

    def test_admin_deletes_any_review(self, admin_id, customer_id, product_id):
        review_id = _process(SubmitReview(owner_id=customer_id, product_id=product_id, rating=1))
        _process(DeleteReview(requested_by=admin_id, review_id=review_id))
        assert current_domain.repository_for(Review).for_product(product_id) == []

    def test_stranger_forbidden(self, register_account, product_id):
        author, stranger = register_account(), register_account()
        review_id = _process(SubmitReview(owner_id=author, product_id=product_id, rating=5))

        with pytest.raises(PermissionDenied):
            _process(DeleteReview(requested_by=stranger, review_id=review_id))

        assert current_domain.repository_for(Review).get(review_id) is not None
