"""Recurso: clases (grupos de alumnos).

A diferencia de los perfiles, aquí el fallback depende de la operación:
- listado => lista vacía
- creación => clase sintetizada a partir de lo pedido
- borrado => se registra y se continúa
"""

from __future__ import annotations

from typing import Any, Awaitable, Mapping, Union
from urllib.parse import urlencode

from pydantic import TypeAdapter

from adapters.resources.base import ResourceApi, UserLike, path_segment
from core.domain.defaults import synthesize_class
from core.domain.models import CreateClassRequest, SchoolClass
from core.services.auth_headers import as_user_record

_CLASS_LIST = TypeAdapter(list[SchoolClass])

# El backend no define rol por defecto para clases; el dashboard es de profesores.
_DEFAULT_ROLE = "teacher"


def _ignore_body(_payload: Any) -> None:
    return None


class ClassApi(ResourceApi):
    def get_classes(
        self,
        user: UserLike,
        *,
        creator_id: str | None = None,
        organization_id: str | None = None,
        course_id: str | None = None,
        student_id: str | None = None,
        user_type: str | None = None,
    ) -> Awaitable[list[SchoolClass]]:
        filters = {
            "creatorId": creator_id,
            "organizationId": organization_id,
            "courseId": course_id,
            "studentId": student_id,
            "userType": user_type,
        }
        query = urlencode({key: value for key, value in filters.items() if value})
        path = f"/classes?{query}" if query else "/classes"
        return self._request(
            path,
            user,
            default_role=_DEFAULT_ROLE,
            parse=_CLASS_LIST.validate_python,
            default_factory=list,
            label="classes",
        )

    def create_class(
        self,
        data: Union[CreateClassRequest, Mapping[str, Any]],
        user: UserLike,
    ) -> Awaitable[SchoolClass]:
        request = data if isinstance(data, CreateClassRequest) else CreateClassRequest.model_validate(dict(data))
        record = as_user_record(user)
        return self._request(
            "/classes",
            record,
            default_role=_DEFAULT_ROLE,
            parse=SchoolClass.model_validate,
            default_factory=lambda: synthesize_class(request, record),
            method="POST",
            json_body=request.model_dump(mode="json", by_alias=True, exclude_none=True),
            label="class",
        )

    def delete_class(self, class_id: str, user: UserLike) -> Awaitable[None]:
        return self._request(
            f"/classes/{path_segment(class_id)}",
            user,
            default_role=_DEFAULT_ROLE,
            parse=_ignore_body,
            default_factory=lambda: None,
            method="DELETE",
            label="class",
        )
