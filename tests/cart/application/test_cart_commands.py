"""Application tests for cart commands."""

import threading

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from emporium.cart.cart import ShoppingCart
from emporium.cart.items import AddToCart, ClearCart, RemoveFromCart
from emporium.domain import emporium
from emporium.shared.locks import identity_lock, process_exclusively


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _cart(owner_id):
    return current_domain.repository_for(ShoppingCart).for_owner(owner_id)


class TestAddToCart:
    def test_first_add_creates_cart(self):
        assert _cart("acct-001") is None

        cart_id = _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=2, unit_price=10.0))

        cart = _cart("acct-001")
        assert str(cart.id) == cart_id
        assert cart.total == pytest.approx(20.0)

    def test_one_cart_per_owner(self):
        first = _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=1, unit_price=1.0))
        second = _process(AddToCart(owner_id="acct-001", product_id="prod-002", quantity=1, unit_price=1.0))
        assert first == second

    def test_merge_persists(self):
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=2, unit_price=10.0))
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=3, unit_price=12.0))

        cart = _cart("acct-001")
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5
        assert cart.items[0].unit_price == 12.0
        assert cart.total == pytest.approx(60.0)

    def test_carts_are_per_owner(self):
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=1, unit_price=1.0))
        _process(AddToCart(owner_id="acct-002", product_id="prod-001", quantity=4, unit_price=1.0))
        assert _cart("acct-001").items[0].quantity == 1
        assert _cart("acct-002").items[0].quantity == 4

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=0, unit_price=1.0))


class TestRemoveFromCart:
    def test_remove(self):
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=1, unit_price=1.0))
        _process(AddToCart(owner_id="acct-001", product_id="prod-002", quantity=1, unit_price=2.0))

        _process(RemoveFromCart(owner_id="acct-001", product_id="prod-001"))

        cart = _cart("acct-001")
        assert [str(i.product_id) for i in cart.items] == ["prod-002"]
        assert cart.total == pytest.approx(2.0)

    def test_absent_product_not_found_and_cart_unchanged(self):
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=2, unit_price=10.0))

        with pytest.raises(ObjectNotFoundError):
            _process(RemoveFromCart(owner_id="acct-001", product_id="prod-999"))

        cart = _cart("acct-001")
        assert len(cart.items) == 1
        assert cart.total == pytest.approx(20.0)

    def test_no_cart_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            _process(RemoveFromCart(owner_id="acct-001", product_id="prod-001"))


class TestClearCart:
    def test_clear_twice(self):
        _process(AddToCart(owner_id="acct-001", product_id="prod-001", quantity=2, unit_price=10.0))

        for _ in range(2):
            _process(ClearCart(owner_id="acct-001"))
            cart = _cart("acct-001")
            assert len(cart.items) == 0
            assert cart.total == 0.0

    def test_no_cart_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            _process(ClearCart(owner_id="acct-001"))


class TestIdentityLock:
    def test_process_exclusively_returns_handler_result(self):
        cart_id = process_exclusively(
            "acct-001", AddToCart(owner_id="acct-001", product_id="prod-001", quantity=1, unit_price=1.0)
        )
        assert str(_cart("acct-001").id) == cart_id

    def test_lock_released_when_command_fails(self):
        with pytest.raises(ObjectNotFoundError):
            process_exclusively("acct-001", ClearCart(owner_id="acct-001"))

        acquired = threading.Event()

        def _contend():
            with identity_lock("acct-001"):
                acquired.set()

        worker = threading.Thread(target=_contend)
        worker.start()
        worker.join(timeout=1)
        assert acquired.is_set()

    def test_concurrent_additions_accumulate(self):
        threads, adds_per_thread, price = 4, 10, 2.5
        errors = []

        def _shopper():
            try:
                with emporium.domain_context():
                    for _ in range(adds_per_thread):
                        process_exclusively(
                            "acct-001",
                            AddToCart(owner_id="acct-001", product_id="prod-001", quantity=1, unit_price=price),
                        )
            except Exception as exc:
                errors.append(exc)

        workers = [threading.Thread(target=_shopper) for _ in range(threads)]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join(timeout=30)

        assert errors == []
        cart = _cart("acct-001")
        assert len(cart.items) == 1
        assert cart.items[0].quantity == threads * adds_per_thread
        assert cart.total == pytest.approx(threads * adds_per_thread * price)

    def test_lock_blocks_other_threads_for_same_identity(self):
        entered = threading.Event()

        def _contend():
            with identity_lock("acct-001"):
                entered.set()

        with identity_lock("acct-001"):
            worker = threading.Thread(target=_contend)
            worker.start()
            assert not entered.wait(timeout=0.1)

        worker.join(timeout=1)
        assert entered.is_set()

    def test_other_identities_are_not_blocked(self):
        entered = threading.Event()

        def _contend():
            with identity_lock("acct-002"):
                entered.set()

        with identity_lock("acct-001"):
            worker = threading.Thread(target=_contend)
            worker.start()
            assert entered.wait(timeout=1)
        worker.join(timeout=1)
