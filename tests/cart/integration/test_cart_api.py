"""Integration tests for cart endpoints via TestClient."""


def _add(client, headers, product_id="prod-001", quantity=1, unit_price=10.0):
    return client.post(
        "/cart",
        json={"product_id": product_id, "quantity": quantity, "unit_price": unit_price},
        headers=headers,
    )


class TestCartAPI:
    def test_add_returns_cart(self, client, bearer, customer_id):
        response = _add(client, bearer(customer_id), quantity=2)
        assert response.status_code == 200
        body = response.json()
        assert body["owner_id"] == customer_id
        assert body["total"] == 20.0
        assert body["items"][0]["quantity"] == 2

    def test_add_same_product_merges(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        _add(client, headers, quantity=2, unit_price=10.0)
        body = _add(client, headers, quantity=3, unit_price=12.0).json()
        assert len(body["items"]) == 1
        assert body["items"][0]["quantity"] == 5
        assert body["items"][0]["unit_price"] == 12.0
        assert body["total"] == 60.0

    def test_view_without_cart_returns_404(self, client, bearer, customer_id):
        response = client.get("/cart", headers=bearer(customer_id))
        assert response.status_code == 404
        assert response.json() == {"error": {"cart": ["Cart not found"]}}

    def test_view(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        _add(client, headers)
        response = client.get("/cart", headers=headers)
        assert response.status_code == 200
        assert response.json()["total"] == 10.0

    def test_remove(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        _add(client, headers, product_id="prod-001")
        _add(client, headers, product_id="prod-002", unit_price=5.0)

        body = client.delete("/cart/prod-001", headers=headers).json()

        assert [i["product_id"] for i in body["items"]] == ["prod-002"]
        assert body["total"] == 5.0

    def test_remove_absent_product_returns_404(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        _add(client, headers)
        assert client.delete("/cart/prod-999", headers=headers).status_code == 404

    def test_clear(self, client, bearer, customer_id):
        headers = bearer(customer_id)
        _add(client, headers)
        for _ in range(2):
            response = client.delete("/cart/clear", headers=headers)
            assert response.status_code == 200
            assert response.json()["items"] == []
            assert response.json()["total"] == 0.0

    def test_requires_credential(self, client):
        assert client.get("/cart").status_code == 401
