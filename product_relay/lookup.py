"""Product lookup relay: SKU in, normalized JSON envelope out."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from .models import LookupFailure, LookupResponse, LookupSuccess
from .upstream import ApplicationError, Empty, Found, TransportError, UpstreamResult, fetch_product

logger = logging.getLogger(__name__)

MISSING_SKU_ERROR = "No SKU provided"
UNKNOWN_ERROR = "An unknown error occurred"


def _failure(status_code: int, error: str) -> LookupResponse:
    return LookupResponse(status_code, LookupFailure(error=error))


def to_lookup_response(sku: str, result: UpstreamResult) -> LookupResponse:
    """Map a classified upstream outcome onto the caller-facing envelope."""

    if isinstance(result, TransportError):
        return _failure(result.status_code, f"Network error: {result.status_code} {result.reason}")
    if isinstance(result, ApplicationError):
        return _failure(400, result.message)
    if isinstance(result, Empty):
        return _failure(404, f"No product found with SKU: {sku}")
    if isinstance(result, Found):
        return LookupResponse(200, LookupSuccess(product=result.product))
    raise TypeError(f"Unhandled upstream outcome: {result!r}")


async def lookup(sku: Optional[str], client: httpx.AsyncClient) -> LookupResponse:
    """Look up a single product by SKU.

    Never raises: every failure, expected or not, comes back as a
    ``LookupFailure`` with the matching HTTP status. Only unexpected faults
    are logged.
    """

    if not sku:
        return _failure(400, MISSING_SKU_ERROR)
    try:
        result = await fetch_product(client, sku)
        return to_lookup_response(sku, result)
    except Exception as exc:
        logger.exception("Error fetching product sku=%r", sku)
        return _failure(500, str(exc) or UNKNOWN_ERROR)
