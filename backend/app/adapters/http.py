"""Shared HTTP plumbing for upstream adapters.

Interprets transport failures, status codes and body shapes uniformly so each
adapter only maps a decoded upstream payload into the canonical model.
"""

import time
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from backend.app.adapters.errors import (
    DecodeError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from backend.app.utils.logging import StructuredUpstreamLogger
from backend.app.utils.metrics import PrometheusUpstreamMetrics

_metrics = PrometheusUpstreamMetrics()
_logger = StructuredUpstreamLogger()


@asynccontextmanager
async def upstream_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or a fresh one that is closed on exit.

    Timeouts are chosen per request, so owned clients carry none.
    """
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(timeout=None) as owned:
        yield owned


def _record(
    source: str,
    url: str,
    outcome: str,
    started: float,
    status_code: int | None = None,
    error_reason: str | None = None,
) -> None:
    latency_ms = (time.perf_counter() - started) * 1000
    _metrics.record_latency(source, outcome, latency_ms)
    if outcome != "success":
        _metrics.inc_error(source, outcome)
    _logger.log_call(
        source=source,
        url=url,
        outcome=outcome,
        latency_ms=latency_ms,
        status_code=status_code,
        error_reason=error_reason,
    )


async def get_json(
    client: httpx.AsyncClient,
    source: str,
    url: str,
    response_type: Any,
    *,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    log_url: str | None = None,
) -> Any:
    """GET `url` and decode the body into `response_type`.

    Args:
        client: httpx client to issue the request with
        source: Upstream name used in errors, logs and metrics (e.g. "open-meteo")
        url: Request URL without query string
        response_type: Pydantic model or typing construct to validate against
        params: Query-string parameters
        headers: Extra request headers
        timeout: Per-request timeout in seconds (None = unbounded)
        log_url: URL to log instead of `url` when the path embeds a credential

    Returns:
        The validated payload

    Raises:
        UpstreamTimeoutError: Request exceeded `timeout`
        UpstreamTransportError: Connection-level failure
        UpstreamStatusError: Non-2xx status (carries status code and raw body)
        DecodeError: Body is not JSON of the expected shape
    """
    shown_url = log_url or url
    started = time.perf_counter()

    try:
        response = await client.get(url, params=params, headers=headers, timeout=timeout)
    except httpx.TimeoutException as e:
        _record(source, shown_url, "timeout", started, error_reason=type(e).__name__)
        raise UpstreamTimeoutError(f"{source} request timed out") from e
    except httpx.TransportError as e:
        _record(source, shown_url, "transport_error", started, error_reason=type(e).__name__)
        raise UpstreamTransportError(f"{source} request failed: {e}") from e

    if not response.is_success:
        _record(source, shown_url, "status_error", started, status_code=response.status_code)
        raise UpstreamStatusError(source, response.status_code, response.text)

    try:
        payload = TypeAdapter(response_type).validate_json(response.content)
    except ValidationError as e:
        _record(
            source,
            shown_url,
            "decode_error",
            started,
            status_code=response.status_code,
            error_reason=f"{e.error_count()} validation error(s)",
        )
        raise DecodeError(f"{source} returned an unexpected response: {e}") from e

    _record(source, shown_url, "success", started, status_code=response.status_code)
    return payload
