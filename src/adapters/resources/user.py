"""Recurso: cuentas de usuario (`/users`).

Las cuentas se parsean como unión etiquetada por `role`
(`core.domain.models.User`).
"""

from __future__ import annotations

from typing import Any, Awaitable
from urllib.parse import urlencode

from adapters.resources.base import ResourceApi, UserLike
from core.domain.defaults import FallbackContext, ResourceType
from core.domain.models import UserRecord, UserRole, parse_user
from core.services.auth_headers import as_user_record

_KNOWN_ROLES = {role.value for role in UserRole} | {"school"}


def account_from_record(record: UserRecord) -> Any:
    """Convierte el usuario llamador en una cuenta tipada (rol desconocido => teacher)."""

    data = record.model_dump(by_alias=True, exclude_none=True)
    data["role"] = record.role if record.role in _KNOWN_ROLES else UserRole.TEACHER.value
    return parse_user(data)


class UserApi(ResourceApi):
    resource_type = ResourceType.USER

    def get_user_by_email(self, email: str) -> Awaitable[Any]:
        """Primera llamada tras el login: aún no hay usuario, se usa el email como id."""

        caller = UserRecord(id=email, email=email, name="", role=UserRole.TEACHER.value)
        ctx = FallbackContext(requested_id=email, caller_user=caller)
        return self._fetch_user(f"/users/by-email?{urlencode({'email': email})}", caller, ctx)

    def get_current_user(self, user: UserLike) -> Awaitable[Any]:
        """Perfil actual; si el backend falla se devuelve el propio llamador."""

        record = as_user_record(user)
        return self._request(
            "/users/me",
            record,
            default_role=self.descriptor.default_role,
            parse=parse_user,
            default_factory=lambda: account_from_record(record),
            label="user",
        )

    def _fetch_user(self, path: str, caller: UserRecord, ctx: FallbackContext) -> Awaitable[Any]:
        descriptor = self.descriptor
        return self._request(
            path,
            caller,
            default_role=descriptor.default_role,
            parse=parse_user,
            default_factory=lambda: descriptor.factory(ctx),
            label="user",
        )
