"""HTTP access for the weather tool.

Every outbound call goes through ``fetch_json``, which maps all transport
failures onto ``TransportError``. There is no retry.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from geoweather.core.exceptions import TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "geoweather/0.1"


def make_client(timeout: float) -> httpx.AsyncClient:
    """Create the async client used for one lookup."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
    )


@asynccontextmanager
async def open_client(
    client: httpx.AsyncClient | None,
    timeout: float,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` unchanged, or a fresh one closed on exit."""
    if client is not None:
        yield client
        return
    async with make_client(timeout) as owned:
        yield owned


async def _get(
    client: httpx.AsyncClient,
    url: str,
    params: dict[str, Any],
    timeout: float,
) -> httpx.Response:
    response = await client.get(url, params=params, timeout=timeout)
    response.raise_for_status()
    return response


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    params: dict[str, Any],
    timeout: float,
) -> Any:
    """GET ``url`` and decode the JSON body.

    ``timeout`` bounds the whole call, from connect to the last body byte,
    not just each individual read. Query parameters are URL-escaped by httpx.

    Raises:
        TransportError: On timeout, an invalid URL, connection failure,
            non-2xx status or a body that is not JSON. The httpx/JSON error
            is the ``__cause__``.
    """
    request_url = url
    try:
        request_url = str(httpx.URL(url, params=params))
        logger.debug(f"GET {request_url}")
        response = await asyncio.wait_for(_get(client, url, params, timeout), timeout)
        data = response.json()
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise TransportError(
            f"Request to {url} timed out after {timeout:g}s", url=request_url, cause=e
        ) from e
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Request to {url} failed with status {e.response.status_code}",
            url=request_url,
            cause=e,
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Request to {url} failed: {e}", url=request_url, cause=e) from e
    except ValueError as e:
        raise TransportError(
            f"Response from {url} is not valid JSON: {e}", url=request_url, cause=e
        ) from e

    logger.debug(f"Response from {url}: {len(response.content)} bytes, {response.text[:200]}")
    return data
