"""Tests for the upstream GraphQL document."""

from product_relay.graphql import PRODUCT_BY_SKU_QUERY, build_payload


def test_build_payload_binds_sku_as_variable():
    """The SKU travels only in the variables map."""

    payload = build_payload("ABC123")

    assert payload == {"query": PRODUCT_BY_SKU_QUERY, "variables": {"sku": "ABC123"}}


def test_sku_is_never_interpolated_into_query_text():
    """Hostile identifiers stay in ``variables`` and leave the document untouched."""

    hostile = '"}) { items { sku } } } #'
    payload = build_payload(hostile)

    assert payload["query"] == PRODUCT_BY_SKU_QUERY
    assert hostile not in payload["query"]
    assert payload["variables"]["sku"] == hostile


def test_query_selects_exact_match_and_price_fields():
    """The query filters on exact SKU and selects the price fields."""

    assert "$sku: String!" in PRODUCT_BY_SKU_QUERY
    assert "sku: { eq: $sku }" in PRODUCT_BY_SKU_QUERY
    for field in ("name", "price_range", "minimum_price", "regular_price", "value", "currency"):
        assert field in PRODUCT_BY_SKU_QUERY
