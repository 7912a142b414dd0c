"""Shared FastAPI dependencies."""

from collections.abc import AsyncGenerator

import httpx


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Provide one upstream HTTP client per request.

    Timeouts are set per upstream call, so the client carries none.
    """
    async with httpx.AsyncClient(timeout=None) as client:
        yield client
