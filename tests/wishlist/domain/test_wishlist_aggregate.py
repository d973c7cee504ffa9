"""Tests for the Wishlist aggregate."""

import pytest
from protean.exceptions import ObjectNotFoundError

from emporium.wishlist.events import ProductUnwished, ProductWished
from emporium.wishlist.wishlist import Wishlist


class TestWishlist:
    def test_new_wishlist_is_empty(self):
        assert Wishlist.create(owner_id="acct-001").product_ids == []

    def test_add_products(self):
        wishlist = Wishlist.create(owner_id="acct-001")
        wishlist.add_product("prod-001")
        wishlist.add_product("prod-002")
        assert wishlist.product_ids == ["prod-001", "prod-002"]

    def test_adding_twice_keeps_one(self):
        wishlist = Wishlist.create(owner_id="acct-001")
        wishlist.add_product("prod-001")
        wishlist.add_product("prod-001")
        assert wishlist.product_ids == ["prod-001"]
        assert len([e for e in wishlist._events if isinstance(e, ProductWished)]) == 1

    def test_remove_product(self):
        wishlist = Wishlist.create(owner_id="acct-001")
        wishlist.add_product("prod-001")
        wishlist.remove_product("prod-001")
        assert wishlist.product_ids == []
        assert any(isinstance(e, ProductUnwished) for e in wishlist._events)

    def test_remove_absent_product(self):
        with pytest.raises(ObjectNotFoundError):
            Wishlist.create(owner_id="acct-001").remove_product("prod-001")
