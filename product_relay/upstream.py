"""Outbound call to the GraphQL catalogue and classification of its reply.

Every reply is turned into exactly one ``UpstreamResult`` variant. Anything
that cannot be classified (malformed JSON, unexpected shapes, transport
exceptions) is left to raise so the caller's error boundary can handle it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import httpx

from .config import settings
from .graphql import build_payload

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
DEFAULT_GRAPHQL_ERROR = "GraphQL error occurred"


@dataclass(frozen=True)
class TransportError:
    status_code: int
    reason: str


@dataclass(frozen=True)
class ApplicationError:
    errors: List[Any] = field(default_factory=list)

    @property
    def message(self) -> str:
        first = self.errors[0] if self.errors else None
        if isinstance(first, dict) and first.get("message"):
            return str(first["message"])
        return DEFAULT_GRAPHQL_ERROR


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Found:
    product: Any


UpstreamResult = Union[TransportError, ApplicationError, Empty, Found]


def _product_items(body: Dict[str, Any]) -> List[Any]:
    # Any level with an unexpected shape means no product.
    data = body.get("data")
    products = data.get("products") if isinstance(data, dict) else None
    items = products.get("items") if isinstance(products, dict) else None
    return items if isinstance(items, list) else []


def classify_body(body: Any) -> UpstreamResult:
    """Classify a decoded GraphQL response body."""

    if not isinstance(body, dict):
        raise ValueError(f"Unexpected GraphQL response body: {type(body).__name__}")
    errors = body.get("errors")
    if errors:
        return ApplicationError(list(errors))
    items = _product_items(body)
    if not items:
        return Empty()
    return Found(items[0])


def classify_response(response: httpx.Response) -> UpstreamResult:
    if not response.is_success:
        return TransportError(response.status_code, response.reason_phrase)
    return classify_body(response.json())


async def fetch_product(client: httpx.AsyncClient, sku: str) -> UpstreamResult:
    """POST the product query for ``sku`` and classify the reply."""

    response = await client.post(settings.upstream_url, json=build_payload(sku), headers=JSON_HEADERS)
    result = classify_response(response)
    logger.debug("upstream sku=%r status=%s outcome=%s", sku, response.status_code, type(result).__name__)
    return result
