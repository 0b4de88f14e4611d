"""Recurso: organizaciones (colegios, academias, empresas)."""

from __future__ import annotations

from typing import Awaitable

from adapters.resources.base import ResourceApi, UserLike
from core.domain.defaults import ResourceType
from core.domain.models import Organization


class OrganizationApi(ResourceApi):
    resource_type = ResourceType.ORGANIZATION

    def get_organization_by_user_id(self, user_id: str, user: UserLike) -> Awaitable[Organization]:
        return self._by_user_id("organization", user_id, user)

    def get_current_organization(self, user: UserLike) -> Awaitable[Organization]:
        return self._current("organization", user)
