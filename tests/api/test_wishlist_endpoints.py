# This file tests wishlist endpoints.

from __future__ import annotations

from tests.api.support import api_test_client, create_category, create_product, create_user


def test_wishlist_round_trip_for_user() -> None:
    with api_test_client() as client:
        category = create_category(client)
        product = create_product(client, category["id"], slug="camera")
        user = create_user(client)
        created = client.post("/api/wishlist", json={"userId": user["id"], "productId": product["id"]})
        by_user = client.get(f"/api/wishlist/user/{user['id']}")
        everything = client.get("/api/wishlist")

    assert created.status_code == 201
    assert created.json()["userId"] == user["id"]
    assert by_user.status_code == 200
    assert by_user.json()[0]["product"]["slug"] == "camera"
    assert everything.json()[0]["product"]["id"] == product["id"]


def test_duplicates_are_allowed_and_lookup_returns_a_list() -> None:
    with api_test_client() as client:
        category = create_category(client)
        product = create_product(client, category["id"])
        user = create_user(client)
        for _ in range(2):
            client.post("/api/wishlist", json={"userId": user["id"], "productId": product["id"]})
        matches = client.get(f"/api/wishlist/{user['id']}/{product['id']}")
        none = client.get(f"/api/wishlist/{user['id']}/other-product")

    assert len(matches.json()) == 2
    assert none.status_code == 200
    assert none.json() == []


def test_unknown_user_has_empty_wishlist() -> None:
    with api_test_client() as client:
        response = client.get("/api/wishlist/user/nobody")

    assert response.status_code == 200
    assert response.json() == []


def test_create_with_unknown_references_returns_500() -> None:
    with api_test_client() as client:
        response = client.post("/api/wishlist", json={"userId": "ghost", "productId": "ghost"})

    assert response.status_code == 500
    assert response.json() == {"error": "Error creating wish item"}


def test_delete_is_204_whether_or_not_anything_matched() -> None:
    with api_test_client() as client:
        category = create_category(client)
        product = create_product(client, category["id"])
        user = create_user(client)
        client.post("/api/wishlist", json={"userId": user["id"], "productId": product["id"]})
        first = client.delete(f"/api/wishlist/{user['id']}/{product['id']}")
        second = client.delete(f"/api/wishlist/{user['id']}/{product['id']}")
        remaining = client.get(f"/api/wishlist/user/{user['id']}").json()

    assert first.status_code == 204
    assert second.status_code == 204
    assert remaining == []
