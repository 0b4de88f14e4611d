"""Recurso: perfiles de administrador."""

from __future__ import annotations

from typing import Awaitable

from adapters.resources.base import ResourceApi, UserLike
from core.domain.defaults import ResourceType
from core.domain.models import Admin


class AdminApi(ResourceApi):
    resource_type = ResourceType.ADMIN

    def get_admin_by_user_id(self, user_id: str, user: UserLike) -> Awaitable[Admin]:
        return self._by_user_id("admin", user_id, user)

    def get_current_admin(self, user: UserLike) -> Awaitable[Admin]:
        return self._current("admin", user)
