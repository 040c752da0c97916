# This file tests the catalog listing and search endpoints end to end.
# It covers page offsets, raw-query sort tokens, bracketed filters, admin mode, and search.

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.api.support import api_test_client, create_category, create_product


def _seed_catalog(client: TestClient) -> dict[str, str]:
    phones = create_category(client, "phones")
    laptops = create_category(client, "laptops")
    create_product(client, phones["id"], slug="budget-phone", title="Budget phone", price=150, rating=3)
    create_product(client, phones["id"], slug="flagship-phone", title="Flagship phone", price=900, rating=5)
    create_product(
        client,
        laptops["id"],
        slug="ultrabook",
        title="Ultrabook",
        price=1400,
        rating=4,
        inStock=0,
        description="Thin and light laptop",
    )
    create_product(client, laptops["id"], slug="workstation", title="Workstation", price=2600, rating=5)
    return {"phones": phones["id"], "laptops": laptops["id"]}


def _titles(response) -> list[str]:
    return [item["title"] for item in response.json()]


def test_listing_attaches_category_name() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        response = client.get("/api/products")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 4
    assert {item["category"]["name"] for item in payload} == {"phones", "laptops"}
    assert all("id" not in item["category"] for item in payload)


def test_listing_sorts_by_raw_query_token() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        ascending = client.get("/api/products?sort=titleAsc")
        descending = client.get("/api/products?sort=priceDesc")

    assert _titles(ascending) == ["Budget phone", "Flagship phone", "Ultrabook", "Workstation"]
    assert _titles(descending) == ["Workstation", "Ultrabook", "Flagship phone", "Budget phone"]


def test_listing_accepts_legacy_price_aliases() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        low = client.get("/api/products?sort=lowPrice")
        high = client.get("/api/products?sort=highPrice")
        default = client.get("/api/products?sort=defaultSort")

    assert [item["price"] for item in low.json()] == [150, 900, 1400, 2600]
    assert [item["price"] for item in high.json()] == [2600, 1400, 900, 150]
    assert default.status_code == 200
    assert len(default.json()) == 4


def test_listing_ignores_unknown_sort_tokens() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        response = client.get("/api/products?sort=passwordAsc")

    assert response.status_code == 200
    assert len(response.json()) == 4


def test_listing_applies_bracketed_filters() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        cheap = client.get("/api/products?filters[price][$lte]=1000&sort=priceAsc")
        top_rated = client.get("/api/products?filters[rating][$gte]=5&sort=titleAsc")
        in_stock = client.get("/api/products?filters[inStock][$equals]=0")
        laptops = client.get("/api/products?filters[category][$equals]=laptops&sort=titleAsc")

    assert _titles(cheap) == ["Budget phone", "Flagship phone"]
    assert _titles(top_rated) == ["Flagship phone", "Workstation"]
    assert _titles(in_stock) == ["Ultrabook"]
    assert _titles(laptops) == ["Ultrabook", "Workstation"]


def test_listing_combines_filters_and_skips_malformed_ones() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        response = client.get(
            "/api/products?filters[price][$gt]=500&filters[price][$lt]=2000"
            "&filters[price][$lte]=abc&filters[color][$equals]=red&sort=priceAsc"
        )

    assert _titles(response) == ["Flagship phone", "Ultrabook"]


def test_listing_pages_skip_ten_and_take_twelve() -> None:
    with api_test_client() as client:
        category = create_category(client)
        for index in range(15):
            create_product(client, category["id"], slug=f"item-{index:02d}", title=f"Item {index:02d}")

        first_page = client.get("/api/products?page=1&sort=titleAsc")
        second_page = client.get("/api/products?page=2&sort=titleAsc")
        bad_page = client.get("/api/products?page=abc&sort=titleAsc")

    assert len(first_page.json()) == 12
    assert _titles(first_page)[0] == "Item 00"
    assert _titles(second_page) == [f"Item {index:02d}" for index in range(10, 15)]
    assert _titles(bad_page) == _titles(first_page)


def test_admin_mode_returns_every_product_without_category() -> None:
    with api_test_client() as client:
        category = create_category(client)
        for index in range(14):
            create_product(client, category["id"], slug=f"admin-{index}")
        response = client.get("/api/products?mode=admin&page=2&sort=titleDesc")

    payload = response.json()
    assert response.status_code == 200
    assert len(payload) == 14
    assert all("category" not in item for item in payload)


def test_search_matches_title_or_description() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        by_title = client.get("/api/search?query=phone")
        by_description = client.get("/api/products/search?query=laptop")
        nothing = client.get("/api/search?query=refrigerator")

    assert sorted(_titles(by_title)) == ["Budget phone", "Flagship phone"]
    assert _titles(by_description) == ["Ultrabook"]
    assert nothing.json() == []


def test_search_treats_wildcards_literally() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        response = client.get("/api/search", params={"query": "%"})

    assert response.status_code == 200
    assert response.json() == []


def test_search_requires_query_parameter() -> None:
    with api_test_client() as client:
        missing = client.get("/api/search")
        empty = client.get("/api/products/search?query=")

    assert missing.status_code == 400
    assert missing.json() == {"error": "Query parameter is required"}
    assert empty.status_code == 400


def test_listing_treats_oversized_page_as_first_page() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        oversized = client.get("/api/products?page=99999999999999999999&sort=titleAsc")
        first = client.get("/api/products?page=1&sort=titleAsc")

    assert oversized.status_code == 200
    assert _titles(oversized) == _titles(first)


def test_listing_skips_out_of_range_filter_values() -> None:
    with api_test_client() as client:
        _seed_catalog(client)
        response = client.get(
            "/api/products?filters[price][$lte]=99999999999999999999"
            "&filters[rating][$gte]=-99999999999999999999&sort=priceAsc"
        )

    assert response.status_code == 200
    assert [item["price"] for item in response.json()] == [150, 900, 1400, 2600]
