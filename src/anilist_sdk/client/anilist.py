"""AniList GraphQL client over HTTP.

Implements GraphQLClient with httpx. AniList's public GraphQL API does not
require authentication; an access token is only sent when configured.
"""

from types import TracebackType
from typing import Any

import httpx

from anilist_sdk.client.base import GraphQLClient
from anilist_sdk.errors import RemoteError, TransportError
from anilist_sdk.settings import Settings
from anilist_sdk.utils.debug import debug


class AniListClient(GraphQLClient):
    """Async AniList GraphQL client.

    Without an injected ``httpx.AsyncClient`` each request opens a short-lived
    connection. Used as an async context manager the client keeps one
    connection pool open until exit.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        access_token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the client from explicit arguments or Settings."""
        self.settings = settings or Settings()
        self.api_url = api_url or self.settings.ANILIST_API_URL
        self.timeout = timeout if timeout is not None else self.settings.ANILIST_TIMEOUT
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if access_token:
            self.headers["Authorization"] = f"Bearer {access_token}"
        else:
            self.headers.update(self.settings.auth_headers())
        self._http_client = http_client
        self._owns_http_client = False

    async def __aenter__(self) -> "AniListClient":
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_http_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    async def request(
        self, document: str, variables: dict[str, Any], operation_name: str
    ) -> dict[str, Any]:
        """POST a GraphQL document to AniList and return its ``data`` object.

        Raises:
            TransportError: On network failures, timeouts, non-JSON bodies and
                HTTP errors without a GraphQL error payload.
            RemoteError: When the response carries a non-empty ``errors`` list.
        """
        body = {
            "query": document,
            "variables": variables,
            "operationName": operation_name,
        }
        debug(f"AniList {operation_name} variables={variables}")

        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, body)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, body)
        except httpx.RequestError as exc:
            debug(f"AniList {operation_name} request failed: {exc!r}")
            raise TransportError(
                f"Request to {self.api_url} failed: {exc!r}"
            ) from exc

        return self._parse_response(response, operation_name)

    async def _post(
        self, client: httpx.AsyncClient, body: dict[str, Any]
    ) -> httpx.Response:
        return await client.post(
            self.api_url, json=body, headers=self.headers, timeout=self.timeout
        )

    def _parse_response(
        self, response: httpx.Response, operation_name: str
    ) -> dict[str, Any]:
        """Map an HTTP response to its ``data`` object or an AniList error."""
        status = response.status_code
        try:
            payload = response.json()
        except ValueError as exc:
            debug(f"AniList {operation_name} returned a non-JSON body (HTTP {status})")
            raise TransportError(
                f"AniList returned a non-JSON response (HTTP {status})", status
            ) from exc

        if not isinstance(payload, dict):
            raise TransportError(
                f"AniList returned an unexpected payload (HTTP {status})", status
            )

        # AniList reports GraphQL errors with 4xx statuses as well as 200
        errors = payload.get("errors")
        if errors:
            remote = RemoteError(errors, status)
            debug(f"AniList {operation_name} failed: {remote}")
            raise remote

        if response.is_error:
            debug(f"AniList {operation_name} returned HTTP {status}")
            raise TransportError(f"AniList returned HTTP {status}", status)

        return payload.get("data") or {}
