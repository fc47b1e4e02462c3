"""FastAPI application exposing the product lookup relay."""
from __future__ import annotations

import logging

import httpx
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from .config import settings
from .http_client import get_client
from .lookup import lookup
from .models import LookupFailure, LookupResponse, LookupSuccess

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# ``force=True`` replaces uvicorn's default handlers so every logger shares
# one format.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Relaying product lookups to %s", settings.upstream_url)

app = FastAPI(title="Product Lookup Relay")

LOOKUP_RESPONSES = {
    200: {"model": LookupSuccess},
    400: {"model": LookupFailure},
    404: {"model": LookupFailure},
    500: {"model": LookupFailure},
}


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "upstream": settings.upstream_url}


def _to_json_response(result: LookupResponse) -> JSONResponse:
    return JSONResponse(content=result.to_dict(), status_code=result.status_code)


@app.get("/api", responses=LOOKUP_RESPONSES)
@app.get("/api/", responses=LOOKUP_RESPONSES, include_in_schema=False)
async def product_without_sku(client: httpx.AsyncClient = Depends(get_client)) -> JSONResponse:
    return _to_json_response(await lookup(None, client))


@app.get("/api/{sku}", responses=LOOKUP_RESPONSES)
async def product_by_sku(sku: str, client: httpx.AsyncClient = Depends(get_client)) -> JSONResponse:
    return _to_json_response(await lookup(sku, client))
