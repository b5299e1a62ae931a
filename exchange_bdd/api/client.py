"""HTTP helpers for the exchange REST API, built on httpx."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional
from urllib.parse import urlencode

import httpx
import structlog

from exchange_bdd.api.context import ApiContext
from exchange_bdd.api.signing import get_api_sign
from exchange_bdd.config import DEFAULT_TIMEOUT_SECONDS, USER_AGENT

logger = structlog.get_logger()

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_params(params: Mapping[str, Any]) -> str:
    """URL-encode params, keeping insertion order."""
    return urlencode(list(params.items()))


def get_url_and_query_string(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Append the query string to url when there are params."""
    if not params:
        return url
    return f"{url}?{encode_params(params)}"


def _headers(**extra: str) -> dict[str, str]:
    return {"User-Agent": USER_AGENT, "Content-Type": FORM_CONTENT_TYPE, **extra}


@asynccontextmanager
async def _client_scope(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    """Use the caller's client, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS) as owned:
        yield owned


async def get(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Response:
    """
    GET a public endpoint.

    Args:
        url: Endpoint URL
        params: Query parameters (omitted from the URL when empty)
        client: Optional client to reuse

    Returns:
        The httpx response (body already read)
    """
    uri = get_url_and_query_string(url, params)
    async with _client_scope(client) as http:
        response = await http.get(uri, headers=_headers())

    logger.info("exchange_request", method="GET", url=uri, status_code=response.status_code)
    return response


async def post(
    url: str,
    params: Mapping[str, Any],
    api_context: ApiContext,
    nonce: str,
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Response:
    """
    POST a signed request to a private endpoint.

    Args:
        url: Endpoint URL
        params: Form parameters (must include the nonce)
        api_context: Credentials used for API-Key and API-Sign
        nonce: Nonce included in params, used by the signature
        client: Optional client to reuse

    Returns:
        The httpx response (body already read)
    """
    body = encode_params(params)
    path = httpx.URL(url).path
    headers = _headers(**{
        "API-Key": api_context.api_key,
        "API-Sign": get_api_sign(nonce, path, api_context.secret_key, body),
    })

    async with _client_scope(client) as http:
        response = await http.post(url, content=body.encode("utf-8"), headers=headers)

    logger.info("exchange_request", method="POST", url=url, status_code=response.status_code)
    return response


def get_content_as_string(response: httpx.Response) -> str:
    """Decode the response body as UTF-8 (raises UnicodeDecodeError)."""
    return response.content.decode("utf-8")


def get_content_as_json(response: httpx.Response) -> Any:
    """Parse the response body as JSON."""
    return json.loads(get_content_as_string(response))
