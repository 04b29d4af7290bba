# =============================================================================
# core/api.py  —  HTTP client for the Transparence Politique API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues exactly ONE GET per logical query and returns the decoded JSON.
#
#   fetch(path, params)
#     1. Drops absent (None) and empty-string parameters
#     2. Sends the rest in the order given, with the fixed headers
#     3. 2xx      → returns response.json(), unvalidated
#        non-2xx  → raises RemoteCallError(status, "API <status>: <body>")
#
#   No retry, no cache, no timeout override (httpx default).  A fresh
#   AsyncClient is opened for each call and closed when the call ends, so an
#   abandoned invocation leaves no connection behind.
#
# TESTING:
#   Pass an httpx.MockTransport as `transport` to fake the API.
# =============================================================================

import logging
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx

from core.config import ApiConfig
from core.errors import RemoteCallError

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, bool]

UNKNOWN_ERROR = "Unknown error"


def build_query(params: Optional[Mapping[str, Optional[Scalar]]]) -> dict[str, str]:
    """Keep only present, non-empty parameters, stringified in order."""
    query: dict[str, str] = {}
    if not params:
        return query
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


def encode_slug(slug: str) -> str:
    """Percent-encode a path segment the way encodeURIComponent does."""
    return quote(slug, safe="!~*'()")


def _body_text(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return UNKNOWN_ERROR


class TransparenceClient:
    """Read-only client for the remote API."""

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ApiConfig()
        self._transport = transport

    def url_for(self, path: str) -> str:
        return self.config.base_url.rstrip("/") + "/" + path.lstrip("/")

    async def fetch(
        self,
        path: str,
        params: Optional[Mapping[str, Optional[Scalar]]] = None,
    ) -> Any:
        url = self.url_for(path)
        query = build_query(params)
        logger.debug("GET %s %s", url, query)

        async with httpx.AsyncClient(
            headers=self.config.headers,
            transport=self._transport,
        ) as client:
            response = await client.get(url, params=query)

        if not response.is_success:
            raise RemoteCallError(
                response.status_code,
                f"API {response.status_code}: {_body_text(response)}",
            )
        return response.json()
