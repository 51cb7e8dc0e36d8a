"""
Customer and product endpoints
"""

from decimal import Decimal

import pytest

from infrastructure import money


class TestCustomerEndpoints:

    @pytest.mark.asyncio
    async def test_list_and_get(self, api_client):
        response = await api_client.get("/api/customers")
        assert response.status_code == 200
        assert len(response.json()) == 5

        response = await api_client.get("/api/customers/2")
        assert response.status_code == 200
        assert response.json() == {
            "id": 2, "first_name": "Jane", "last_name": "Smith", "email": "jane.smith@email.com"
        }

    @pytest.mark.asyncio
    async def test_get_unknown(self, api_client):
        response = await api_client.get("/api/customers/999")
        assert response.status_code == 404
        assert response.json()["error"] == "HTTP 404"

    @pytest.mark.asyncio
    async def test_create_returns_location(self, api_client):
        response = await api_client.post("/api/customers", json={
            "first_name": "Dana", "last_name": "Lee", "email": "dana.lee@email.com"
        })

        assert response.status_code == 201
        assert response.json()["id"] == 6
        assert response.headers["location"].endswith("/api/customers/6")

        follow = await api_client.get(response.headers["location"])
        assert follow.json()["first_name"] == "Dana"

    @pytest.mark.asyncio
    async def test_create_validation(self, api_client):
        response = await api_client.post("/api/customers", json={"first_name": "", "email": "x@y.z"})
        assert response.status_code == 422
        assert response.json()["error"] == "Validation Error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["not-an-email", "missing-at.email.com", "two@@email.com"])
    async def test_malformed_email_rejected(self, api_client, store, email):
        response = await api_client.post("/api/customers", json={
            "first_name": "A", "last_name": "B", "email": email
        })

        assert response.status_code == 422
        assert "body -> email" in {d["field"] for d in response.json()["detail"]}
        assert store.counts()["customers"] == 5

    @pytest.mark.asyncio
    async def test_update_with_malformed_email_rejected(self, api_client):
        body = {"id": 2, "first_name": "Jane", "last_name": "Smith", "email": "jane.smith"}
        response = await api_client.put("/api/customers/2", json=body)

        assert response.status_code == 422
        assert (await api_client.get("/api/customers/2")).json()["email"] == "jane.smith@email.com"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, api_client):
        body = {"id": 3, "first_name": "Robert", "last_name": "Johnson", "email": "rob@email.com"}
        response = await api_client.put("/api/customers/3", json=body)
        assert response.status_code == 204
        assert (await api_client.get("/api/customers/3")).json()["first_name"] == "Robert"

        response = await api_client.delete("/api/customers/3")
        assert response.status_code == 204
        assert (await api_client.get("/api/customers/3")).status_code == 404

    @pytest.mark.asyncio
    async def test_update_id_mismatch(self, api_client):
        body = {"id": 4, "first_name": "A", "last_name": "B", "email": "alex.berg@email.com"}
        response = await api_client.put("/api/customers/3", json=body)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_unknown(self, api_client):
        body = {"id": 99, "first_name": "A", "last_name": "B", "email": "alex.berg@email.com"}
        response = await api_client.put("/api/customers/99", json=body)
        assert response.status_code == 404


class TestProductEndpoints:

    @pytest.mark.asyncio
    async def test_list_and_get(self, api_client):
        response = await api_client.get("/api/products")
        assert [p["name"] for p in response.json()][:2] == ["Laptop", "Smartphone"]

        product = (await api_client.get("/api/products/1")).json()
        assert money(product, "price") == Decimal("1299.99")

    @pytest.mark.asyncio
    async def test_by_max_price(self, api_client):
        response = await api_client.get("/api/products/price/300")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [3, 5]

    @pytest.mark.asyncio
    async def test_create_update_delete(self, api_client):
        response = await api_client.post("/api/products", json={
            "name": "Monitor", "description": "27-inch display", "price": 349.5
        })
        assert response.status_code == 201
        assert response.headers["location"].endswith("/api/products/6")

        response = await api_client.put("/api/products/6", json={
            "id": 6, "name": "Monitor", "description": None, "price": 299
        })
        assert response.status_code == 204
        product = (await api_client.get("/api/products/6")).json()
        assert product["description"] is None
        assert product["price"] == "299"

        assert (await api_client.delete("/api/products/6")).status_code == 204
        assert (await api_client.delete("/api/products/6")).status_code == 404

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, api_client):
        response = await api_client.post("/api/products", json={"name": "Bad", "price": -1})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_id_mismatch(self, api_client):
        response = await api_client.put("/api/products/1", json={"id": 2, "name": "X", "price": 1})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_prices_round_trip_exactly(self, api_client):
        assert (await api_client.get("/api/products/1")).json()["price"] == "1299.99"

        response = await api_client.post("/api/products", json={
            "name": "Server rack", "price": "12345678901234567.89"
        })
        assert response.json()["price"] == "12345678901234567.89"
        product = (await api_client.get(response.headers["location"])).json()
        assert product["price"] == "12345678901234567.89"

        response = await api_client.post("/api/orderitems", json={
            "order_id": 1, "product_id": product["id"], "quantity": 1
        })
        assert response.json()["unit_price"] == "12345678901234567.89"
        order = (await api_client.get("/api/orders/1")).json()
        assert order["total_amount"] == "12345678901236067.87"
