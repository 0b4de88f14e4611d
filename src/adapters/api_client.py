"""Punto de entrada único a los recursos del backend.

Un proceso construye un `ApiClient` (y con él un único pool de conexiones
httpx) y lo pasa por referencia a quien necesite datos. No hay estado global.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from adapters.http_client import HttpResourceFetcher, build_async_client
from adapters.resources import (
    AdminApi,
    ClassApi,
    OrganizationApi,
    ParentApi,
    StudentApi,
    TeacherApi,
    UserApi,
)
from core.config import AppSettings
from core.interfaces.fetcher import ResourceFetcher


class ApiClient:
    """Agrupa los clientes de recursos sobre un fetcher compartido."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        fetcher: ResourceFetcher | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._http: httpx.AsyncClient | None = None
        if fetcher is None:
            self._http = build_async_client(self.settings, transport=transport)
            fetcher = HttpResourceFetcher(self.settings, client=self._http)
        self.fetcher = fetcher

        self.admins = AdminApi(self.settings, fetcher=fetcher)
        self.organizations = OrganizationApi(self.settings, fetcher=fetcher)
        self.parents = ParentApi(self.settings, fetcher=fetcher)
        self.students = StudentApi(self.settings, fetcher=fetcher)
        self.teachers = TeacherApi(self.settings, fetcher=fetcher)
        self.users = UserApi(self.settings, fetcher=fetcher)
        self.classes = ClassApi(self.settings, fetcher=fetcher)

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
