"""Recurso: perfiles de profesor."""

from __future__ import annotations

from typing import Awaitable

from adapters.resources.base import ResourceApi, UserLike
from core.domain.defaults import FallbackContext, ResourceType
from core.domain.models import Teacher
from core.services.auth_headers import as_user_record


class TeacherApi(ResourceApi):
    resource_type = ResourceType.TEACHER

    def create_teacher_from_user(self, user_id: str, user: UserLike) -> Awaitable[Teacher]:
        """Crea el perfil de profesor de un usuario existente (POST)."""

        record = as_user_record(user)
        ctx = FallbackContext(requested_id=user_id, caller_user=record)
        return self._fetch_resource(
            "/teachers/from-user",
            record,
            ctx,
            method="POST",
            json_body={"userId": user_id},
        )

    def get_teacher_by_user_id(self, user_id: str, user: UserLike) -> Awaitable[Teacher]:
        return self._by_user_id("teacher", user_id, user)

    def get_current_teacher(self, user: UserLike) -> Awaitable[Teacher]:
        return self._current("teacher", user)
