"""HTTP client provider for upstream calls.

Each request gets its own ``httpx.AsyncClient`` so concurrent lookups share no
connection state. The client follows redirects and keeps httpx's default
timeout.
"""
from __future__ import annotations

from typing import AsyncIterator

import httpx


async def get_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client
