# This file tests customer order endpoints.

from __future__ import annotations

from tests.api.support import api_test_client, create_order, order_payload


def test_create_order_stamps_date_time() -> None:
    with api_test_client() as client:
        order = create_order(client)

    assert order["id"]
    assert order["dateTime"]
    assert order["postalCode"] == "11000"
    assert order["orderNotice"] == "Ring twice"
    assert order["adress"] == "Main Street 1"


def test_create_order_defaults_optional_fields() -> None:
    payload = order_payload()
    for optional in ("company", "apartment", "orderNotice"):
        payload.pop(optional)

    with api_test_client() as client:
        response = client.post("/api/orders", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["company"] == ""
    assert body["apartment"] == ""
    assert body["orderNotice"] == ""


def test_create_order_requires_contact_fields() -> None:
    payload = order_payload()
    payload.pop("email")

    with api_test_client() as client:
        response = client.post("/api/orders", json=payload)

    assert response.status_code == 400


def test_list_and_get_orders() -> None:
    with api_test_client() as client:
        first = create_order(client, name="Ana")
        second = create_order(client, name="Marko")
        listed = client.get("/api/orders")
        found = client.get(f"/api/orders/{second['id']}")
        missing = client.get("/api/orders/unknown")

    assert [order["id"] for order in listed.json()] == [first["id"], second["id"]]
    assert found.json()["name"] == "Marko"
    assert missing.status_code == 404
    assert missing.json() == {"error": "Order not found"}


def test_update_order_status() -> None:
    with api_test_client() as client:
        order = create_order(client)
        response = client.put(f"/api/orders/{order['id']}", json={"status": "delivered"})
        missing = client.put("/api/orders/unknown", json={"status": "delivered"})

    assert response.status_code == 200
    assert response.json()["status"] == "delivered"
    assert response.json()["city"] == "Belgrade"
    assert missing.status_code == 404


def test_delete_order_also_removes_its_product_links() -> None:
    with api_test_client() as client:
        category = client.post("/api/categories", json={"name": "misc"}).json()
        product = client.post(
            "/api/products",
            json={
                "slug": "mug",
                "title": "Mug",
                "mainImage": "mug.webp",
                "price": 8,
                "description": "Coffee mug",
                "manufacturer": "Potter",
                "categoryId": category["id"],
            },
        ).json()
        order = create_order(client)
        client.post(
            "/api/order-product",
            json={"customerOrderId": order["id"], "productId": product["id"], "quantity": 2},
        )

        response = client.delete(f"/api/orders/{order['id']}")
        links = client.get(f"/api/order-product/{order['id']}").json()
        again = client.delete(f"/api/orders/{order['id']}")

    assert response.status_code == 204
    assert links == []
    assert again.status_code == 404


def test_order_total_must_fit_integer_column() -> None:
    with api_test_client() as client:
        created = client.post("/api/orders", json=order_payload(total=2**31))
        order = create_order(client)
        updated = client.put(f"/api/orders/{order['id']}", json={"total": 99999999999999999999})

    assert created.status_code == 400
    assert updated.status_code == 400
