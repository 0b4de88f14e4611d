"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, cookies de sesión y logging.
- Facilita testeo: el transporte se puede sustituir por `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.errors import TransportFailure

LOGGER = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del cliente.

    Por qué un builder:
    - Centraliza timeouts/headers/cookies para que todos los recursos se
      comporten igual.
    - Un proceso puede construir un único cliente (pool de conexiones) y
      pasarlo por referencia a `HttpResourceFetcher`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        cookies=settings.session_cookies(),
        transport=transport,
    )


class HttpResourceFetcher:
    """Implementación HTTP de `core.interfaces.fetcher.ResourceFetcher`.

    - Un intento por llamada, sin reintentos.
    - No guarda estado entre llamadas (salvo el pool de conexiones si se le
      pasa un cliente compartido).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._transport = transport

    async def fetch(
        self,
        url: str,
        headers: Mapping[str, str],
        *,
        method: str = "GET",
        json_body: Any = None,
    ) -> Any:
        if self._client is not None:
            response = await self._send(self._client, url, headers, method, json_body)
        else:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await self._send(client, url, headers, method, json_body)

        if not response.is_success:
            LOGGER.debug("%s %s -> HTTP %s: %s", method, url, response.status_code, response.text[:500])
            raise TransportFailure(
                f"{method} {url} returned HTTP {response.status_code}",
                kind=TransportFailure.HTTP_STATUS,
                status_code=response.status_code,
                url=url,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TransportFailure(
                f"{method} {url} returned a non-JSON body",
                kind=TransportFailure.PARSE,
                status_code=response.status_code,
                url=url,
            ) from exc

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: Mapping[str, str],
        method: str,
        json_body: Any,
    ) -> httpx.Response:
        try:
            return await client.request(method, url, headers=dict(headers), json=json_body)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.CookieConflict, UnicodeEncodeError) as exc:
            # Headers no ASCII o URL inválida fallan al construir la request.
            raise TransportFailure(
                f"{method} {url} failed: {exc!r}",
                kind=TransportFailure.NETWORK,
                url=url,
            ) from exc
