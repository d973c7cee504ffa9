"""Integration tests for exception-to-status translation."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.exceptions import ObjectNotFoundError, ValidationError
from sqlalchemy.exc import OperationalError

from emporium.api.errors import register_error_handlers
from emporium.shared.errors import NotAuthenticated, PermissionDenied

_RAISERS = {
    "invalid": lambda: ValidationError({"field": ["bad value"]}),
    "missing": lambda: ObjectNotFoundError({"thing": ["Thing not found"]}),
    "missing_record": lambda: ObjectNotFoundError("Order with id `ord-1` does not exist"),
    "anonymous": lambda: NotAuthenticated({"token": ["Malformed credential"]}),
    "forbidden": lambda: PermissionDenied({"role": ["You are not authorized to do that"]}),
    "timeout": lambda: TimeoutError("store timed out"),
    "disconnected": lambda: ConnectionError("store unreachable"),
    "operational": lambda: OperationalError("SELECT 1", {}, Exception("server closed the connection")),
    "bug": lambda: RuntimeError("unexpected"),
}


@pytest.fixture()
def failing_client():
    app = FastAPI()

    @app.get("/raise/{kind}")
    async def _raise(kind: str):
        raise _RAISERS[kind]()

    register_error_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "kind, status",
    [
        ("invalid", 400),
        ("missing", 404),
        ("missing_record", 404),
        ("anonymous", 401),
        ("forbidden", 403),
        ("timeout", 503),
        ("disconnected", 503),
        ("operational", 503),
        ("bug", 500),
    ],
)
def test_status_codes(failing_client, kind, status):
    assert failing_client.get(f"/raise/{kind}").status_code == status


def test_error_body_carries_messages(failing_client):
    assert failing_client.get("/raise/invalid").json() == {"error": {"field": ["bad value"]}}
    assert failing_client.get("/raise/forbidden").json() == {"error": {"role": ["You are not authorized to do that"]}}


def test_unavailable_hides_details(failing_client):
    body = failing_client.get("/raise/operational").json()
    assert body == {"error": {"store": ["Service temporarily unavailable"]}}


def test_not_found_body_carries_field_messages(failing_client):
    assert failing_client.get("/raise/missing").json() == {"error": {"thing": ["Thing not found"]}}


def test_not_found_body_carries_repository_message(failing_client):
    assert failing_client.get("/raise/missing_record").json() == {"error": "Order with id `ord-1` does not exist"}
