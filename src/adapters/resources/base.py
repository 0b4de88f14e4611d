"""Base de los clientes de recursos del backend.

Cada método público construye URL y headers *de forma síncrona* (así
`ConfigurationError` y `MissingIdentityError` saltan en la llamada, antes de
cualquier I/O) y devuelve la corrutina de `fetch_with_fallback`.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel

from adapters.http_client import HttpResourceFetcher
from core.config import AppSettings, resource_url
from core.domain.defaults import FallbackContext, ResourceDescriptor, ResourceType, get_descriptor
from core.interfaces.fetcher import ResourceFetcher
from core.services.auth_headers import as_user_record, build_auth_headers
from core.services.fallback import fetch_with_fallback

T = TypeVar("T")

UserLike = Union[BaseModel, Mapping[str, Any]]


def path_segment(value: str) -> str:
    """Escapa un valor para usarlo como segmento de path."""

    return quote(str(value), safe="")


class ResourceApi:
    """Cliente de un tipo de recurso.

    Las subclases fijan `resource_type`; el descriptor aporta modelo, rol por
    defecto y fábrica de fallback.
    """

    resource_type: ResourceType

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        fetcher: ResourceFetcher | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._fetcher = fetcher or HttpResourceFetcher(self._settings)

    @property
    def descriptor(self) -> ResourceDescriptor:
        return get_descriptor(self.resource_type)

    def _request(
        self,
        path: str,
        user: UserLike,
        *,
        default_role: str,
        parse: Callable[[Any], T],
        default_factory: Callable[[], T],
        method: str = "GET",
        json_body: Any = None,
        label: str,
    ) -> Awaitable[T]:
        url = resource_url(self._settings, path)
        headers = build_auth_headers(user, default_role)
        if json_body is not None:
            headers["Content-Type"] = "application/json"
        return fetch_with_fallback(
            self._fetcher,
            url,
            headers,
            parse=parse,
            default_factory=default_factory,
            method=method,
            json_body=json_body,
            label=label,
        )

    def _fetch_resource(
        self,
        path: str,
        user: UserLike,
        ctx: FallbackContext,
        *,
        method: str = "GET",
        json_body: Any = None,
    ) -> Awaitable[Any]:
        descriptor = self.descriptor
        return self._request(
            path,
            user,
            default_role=descriptor.default_role,
            parse=descriptor.model.model_validate,
            default_factory=lambda: descriptor.factory(ctx),
            method=method,
            json_body=json_body,
            label=descriptor.resource_type.value,
        )

    def _by_user_id(self, prefix: str, user_id: str, user: UserLike) -> Awaitable[Any]:
        record = as_user_record(user)
        ctx = FallbackContext(requested_id=user_id, caller_user=record)
        return self._fetch_resource(f"/{prefix}/user/{path_segment(user_id)}", record, ctx)

    def _current(self, prefix: str, user: UserLike) -> Awaitable[Any]:
        record = as_user_record(user)
        return self._fetch_resource(f"/{prefix}/me", record, FallbackContext.for_current(record))
