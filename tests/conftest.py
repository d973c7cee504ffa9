import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay and keeps password hashing cheap before any
    emporium module is imported.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("EMPORIUM_SECRET_KEY", "test-signing-key")
    os.environ.setdefault("EMPORIUM_PASSWORD_ITERATIONS", "1000")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def _emporium_domain():
    """Initialize the emporium domain once per session."""
    from emporium.domain import emporium

    emporium.init()
    return emporium


@pytest.fixture(scope="session", autouse=True)
def setup_db(_emporium_domain):
    from emporium.utils.db import drop_db, setup_db

    setup_db(_emporium_domain)

    yield

    drop_db(_emporium_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_emporium_domain):
    """Push domain context before each test, cleanup after."""
    from emporium.auth import reset_issuer

    ctx = _emporium_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    reset_issuer()


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_account():
    """Sign up accounts with unique contact details; returns the new account id."""
    from protean import current_domain

    from emporium.account.account import Role
    from emporium.account.registration import SignUp

    counter = iter(range(1, 10_000))

    def _register(role=Role.CUSTOMER.value, **overrides):
        n = next(counter)
        fields = {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": f"jane.{n}@example.com",
            "password": "s3cret-pass",
            "phone_number": f"+1-555-{n:04d}",
            "role": role,
        }
        fields.update(overrides)
        return current_domain.process(SignUp(**fields), asynchronous=False)

    return _register


@pytest.fixture()
def customer_id(register_account):
    return register_account()


@pytest.fixture()
def admin_id(register_account):
    return register_account(role="admin", first_name="Ada", last_name="Admin")


@pytest.fixture()
def add_product(admin_id):
    """Add catalogue products as the admin; returns the new product id."""
    from protean import current_domain

    from emporium.catalogue.management import AddProduct

    def _add(**overrides):
        fields = {
            "requested_by": admin_id,
            "name": "Walnut Desk Lamp",
            "description": "Adjustable lamp with a solid walnut base",
            "price": 89.0,
            "stock_quantity": 25,
            "category": "Lighting",
            "images": '["https://cdn.example.com/lamp-1.jpg"]',
        }
        fields.update(overrides)
        return current_domain.process(AddProduct(**fields), asynchronous=False)

    return _add


@pytest.fixture()
def product_id(add_product):
    return add_product()


@pytest.fixture()
def bearer():
    """Authorization headers carrying a valid credential for an account id."""
    from emporium.auth import get_issuer

    def _headers(account_id):
        token = get_issuer().issue(account_id, {"email": "", "first_name": "", "last_name": ""})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def client():
    """TestClient over every storefront router with the storefront error handlers."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from emporium.api import ROUTERS
    from emporium.api.errors import register_error_handlers

    app = FastAPI()
    for router in ROUTERS:
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)
