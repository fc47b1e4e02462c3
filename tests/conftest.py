"""Shared fixtures for relay tests."""
from __future__ import annotations

import copy

import pytest

from product_relay.config import settings

DOOR = {
    "name": "Door",
    "sku": "ABC123",
    "price_range": {"minimum_price": {"regular_price": {"value": 99.5, "currency": "USD"}}},
}


@pytest.fixture
def upstream_url() -> str:
    return settings.upstream_url


@pytest.fixture
def door() -> dict:
    return copy.deepcopy(DOOR)


@pytest.fixture
def found_body(door: dict) -> dict:
    return {"data": {"products": {"items": [door]}}}


@pytest.fixture
def empty_body() -> dict:
    return {"data": {"products": {"items": []}}}
