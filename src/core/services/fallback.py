"""Fetch con fallback: el patrón "cliente de recursos resiliente".

Un único intento contra el backend. Si falla (red, HTTP no-2xx o payload que
no encaja con el modelo) se registra un warning y se devuelve el valor de
`default_factory`. Nunca se propaga un `TransportFailure` al llamador.

404 y 5xx/red degradan igual, pero el log los distingue.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from pydantic import ValidationError

from core.errors import TransportFailure
from core.interfaces.fetcher import ResourceFetcher

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_with_fallback(
    fetcher: ResourceFetcher,
    url: str,
    headers: Mapping[str, str],
    *,
    parse: Callable[[Any], T],
    default_factory: Callable[[], T],
    method: str = "GET",
    json_body: Any = None,
    label: str = "resource",
) -> T:
    try:
        payload = await fetcher.fetch(url, headers, method=method, json_body=json_body)
        try:
            return parse(payload)
        except (ValidationError, TypeError, ValueError) as exc:
            raise TransportFailure(
                f"response does not match the expected {label} shape: {exc}",
                kind=TransportFailure.PARSE,
                url=url,
            ) from exc
    except TransportFailure as failure:
        if failure.is_not_found:
            LOGGER.warning("%s not found at %s %s; using default %s", label, method, url, label)
        else:
            LOGGER.warning(
                "%s API not available (%s) at %s %s; using default %s: %s",
                label,
                failure.describe(),
                method,
                url,
                label,
                failure,
            )
        return default_factory()
