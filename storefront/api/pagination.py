# This file turns product-listing query strings into paging, sort, and filter specs.
# Sort and filter tokens are read from the raw query string, because storefront clients send
# bracketed keys like `filters[price][$lte]=3000` that FastAPI's parsed query params do not model.

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote_plus

from storefront.api.models import INT_COLUMN_MAX, INT_COLUMN_MIN

SORTABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "price", "rating", "inStock", "slug", "manufacturer"}
)
FILTERABLE_FIELDS: frozenset[str] = frozenset({"price", "rating", "inStock", "category"})
FILTER_OPERATORS: frozenset[str] = frozenset({"lt", "lte", "gt", "gte", "equals"})

_FILTER_KEY_RE = re.compile(r"^filters\[(?P<field>[A-Za-z]+)\]\[\$(?P<operator>[A-Za-z]+)\]$")


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: str

    @property
    def as_text(self) -> str:
        return f"{self.field}:{self.order}"


# Legacy tokens still sent by the storefront frontend.
SORT_ALIASES: dict[str, SortSpec] = {
    "lowPrice": SortSpec(field="price", order="asc"),
    "highPrice": SortSpec(field="price", order="desc"),
}


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    page_size: int
    take: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class FilterSpec:
    field: str
    operator: str
    value: int | str


def split_raw_query(raw_query: str) -> list[tuple[str, str]]:
    """Split `a=1&b=2` into decoded key/value pairs, keeping order and duplicates."""

    pairs: list[tuple[str, str]] = []
    for item in raw_query.split("&"):
        if not item:
            continue
        key, _, value = item.partition("=")
        pairs.append((unquote_plus(key), unquote_plus(value)))
    return pairs


def parse_page(raw_page: str | None) -> int:
    """Parse the requested page; anything that is not an in-range positive integer means page 1."""

    if raw_page is None:
        return 1
    try:
        page = int(raw_page)
    except ValueError:
        return 1
    return page if 1 <= page <= INT_COLUMN_MAX else 1


def catalog_pagination(*, raw_page: str | None, page_size: int, take: int) -> PaginationSpec:
    return PaginationSpec(page=parse_page(raw_page), page_size=page_size, take=take)


def parse_sort_token(raw_query: str) -> SortSpec | None:
    """Parse a `<field><Asc|Desc>` sort token; the last `sort` key wins."""

    token: str | None = None
    for key, value in split_raw_query(raw_query):
        if key == "sort":
            token = value.strip()

    if not token or token == "defaultSort":
        return None
    if token in SORT_ALIASES:
        return SORT_ALIASES[token]

    for suffix, order in (("Asc", "asc"), ("Desc", "desc")):
        if token.endswith(suffix):
            field = token[: -len(suffix)]
            if field in SORTABLE_FIELDS:
                return SortSpec(field=field, order=order)
    return None


def parse_filters(raw_query: str) -> list[FilterSpec]:
    """Collect `filters[<field>][$<op>]=<value>` tokens, skipping malformed or out-of-range ones."""

    filters: list[FilterSpec] = []
    for key, value in split_raw_query(raw_query):
        match = _FILTER_KEY_RE.match(key)
        if match is None:
            continue
        field = match.group("field")
        operator = match.group("operator")
        if field not in FILTERABLE_FIELDS or operator not in FILTER_OPERATORS:
            continue

        if field == "category":
            if operator != "equals" or not value:
                continue
            filters.append(FilterSpec(field=field, operator=operator, value=value))
            continue

        try:
            numeric_value = int(value)
        except ValueError:
            continue
        if not INT_COLUMN_MIN <= numeric_value <= INT_COLUMN_MAX:
            continue
        filters.append(FilterSpec(field=field, operator=operator, value=numeric_value))
    return filters
