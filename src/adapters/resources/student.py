"""Recurso: perfiles de alumno.

Además de los lookups por user id y `/me`, el backend expone la búsqueda por
email (`/students/email/<email>`, en plural).
"""

from __future__ import annotations

from typing import Awaitable

from adapters.resources.base import ResourceApi, UserLike, path_segment
from core.domain.defaults import FallbackContext, ResourceType
from core.domain.models import Student
from core.services.auth_headers import as_user_record


class StudentApi(ResourceApi):
    resource_type = ResourceType.STUDENT

    def get_student_by_email(self, email: str, user: UserLike) -> Awaitable[Student]:
        record = as_user_record(user)
        ctx = FallbackContext(requested_id=email, caller_user=record)
        return self._fetch_resource(f"/students/email/{path_segment(email)}", record, ctx)

    def get_student_by_user_id(self, user_id: str, user: UserLike) -> Awaitable[Student]:
        return self._by_user_id("student", user_id, user)

    def get_current_student(self, user: UserLike) -> Awaitable[Student]:
        return self._current("student", user)
