"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from geotrack.exceptions import (
    GeotrackAPIError,
    GeotrackConnectionError,
    GeotrackTimeoutError,
    GeotrackValidationError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise GeotrackAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise GeotrackValidationError(
            f"Expected JSON from {response.url}, got {response.headers.get('content-type', 'no content type')}",
        ) from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(
        self,
        endpoint: str,
        params: list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            raise GeotrackTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise GeotrackConnectionError(str(exc) or type(exc).__name__) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(
        self,
        endpoint: str,
        params: list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Perform an async GET request and return parsed JSON.

        *timeout* overrides the client default for this request only.
        """
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            response = await self._client.get(endpoint, **kwargs)
        except httpx.TimeoutException as exc:
            raise GeotrackTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise GeotrackConnectionError(str(exc) or type(exc).__name__) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
