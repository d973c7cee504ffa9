"""Integration tests for order endpoints via TestClient."""

_ORDER = {
    "items": [
        {"product_id": "prod-001", "name": "Lamp", "quantity": 2, "unit_price": 5.0},
        {"product_id": "prod-002", "name": "Shade", "quantity": 1, "unit_price": 10.0},
    ],
    "payment_method": "Credit Card",
}


def _place(client, headers, **overrides):
    response = client.post("/order", json={**_ORDER, **overrides}, headers=headers)
    assert response.status_code == 201
    return response.json()["order_id"]


class TestPlaceOrderAPI:
    def test_place_and_list(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        order_id = _place(client, headers)

        response = client.get("/order", headers=headers)

        assert response.status_code == 200
        [order] = response.json()
        assert order["order_id"] == order_id
        assert order["total_price"] == 20.0
        assert order["status"] == "Processing"
        assert order["payment_status"] == "Pending"

    def test_zero_quantity_returns_400(self, client, bearer, customer_id):
        body = {**_ORDER, "items": [{"product_id": "prod-001", "quantity": 0, "unit_price": 5.0}]}
        response = client.post("/order", json=body, headers=bearer(customer_id))
        assert response.status_code == 400

    def test_no_orders_returns_404_message(self, client, bearer, customer_id):
        response = client.get("/order", headers=bearer(customer_id))
        assert response.status_code == 404
        assert response.json() == {"message": "No orders found for this user"}


class TestOrderAdminAPI:
    def test_admin_updates_status(self, client, bearer, admin_id, customer_id):
        order_id = _place(client, bearer(customer_id))

        response = client.put(f"/order/{order_id}/status", json={"status": "Shipping"}, headers=bearer(admin_id))

        assert response.status_code == 200
        assert client.get("/order", headers=bearer(customer_id)).json()[0]["status"] == "Shipping"

    def test_customer_gets_403(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        order_id = _place(client, headers)

        response = client.put(f"/order/{order_id}/status", json={"status": "Delivered"}, headers=headers)

        assert response.status_code == 403
        assert client.get("/order", headers=headers).json()[0]["status"] == "Processing"

    def test_invalid_status_returns_400(self, client, bearer, admin_id, customer_id):
        order_id = _place(client, bearer(customer_id))
        response = client.put(f"/order/{order_id}/status", json={"status": "Lost"}, headers=bearer(admin_id))
        assert response.status_code == 400

    def test_unknown_order_returns_404(self, client, bearer, admin_id):
        response = client.put("/order/missing/status", json={"status": "Shipping"}, headers=bearer(admin_id))
        assert response.status_code == 404

    def test_record_payment(self, client, bearer, admin_id, customer_id):
        order_id = _place(client, bearer(customer_id))

        response = client.put(
            f"/order/{order_id}/payment",
            json={"transaction_id": "txn-8842", "succeeded": True},
            headers=bearer(admin_id),
        )

        assert response.status_code == 200
        order = client.get("/order", headers=bearer(customer_id)).json()[0]
        assert order["transaction_id"] == "txn-8842"
        assert order["payment_status"] == "Succeeded"


class TestCancelOrderAPI:
    def test_owner_cancels(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        order_id = _place(client, headers)

        assert client.delete(f"/order/{order_id}", headers=headers).status_code == 200
        assert client.get("/order", headers=headers).status_code == 404

    def test_non_owner_gets_404(self, client, bearer, register_account):
        owner, stranger = register_account(), register_account()
        order_id = _place(client, bearer(owner))

        response = client.delete(f"/order/{order_id}", headers=bearer(stranger))
        assert response.status_code == 404
        assert response.json() == {"error": {"order": ["Order not found"]}}
        assert len(client.get("/order", headers=bearer(owner)).json()) == 1
