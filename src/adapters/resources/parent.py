"""Recurso: perfiles de padres/tutores."""

from __future__ import annotations

from typing import Awaitable

from adapters.resources.base import ResourceApi, UserLike
from core.domain.defaults import ResourceType
from core.domain.models import Parent


class ParentApi(ResourceApi):
    resource_type = ResourceType.PARENT

    def get_parent_by_user_id(self, user_id: str, user: UserLike) -> Awaitable[Parent]:
        return self._by_user_id("parent", user_id, user)

    def get_current_parent(self, user: UserLike) -> Awaitable[Parent]:
        return self._current("parent", user)
