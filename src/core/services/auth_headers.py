"""Headers de identidad para el backend.

El backend identifica al llamador con dos headers:
- `x-user-id`: id del usuario o, si no lo tiene, su email.
- `x-user-type`: rol del usuario o el rol por defecto del recurso.

Del usuario llamador solo se leen id, email, nombre y rol; el resto de campos
(fechas, flags) no se valida aquí.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

from core.domain.models import UserRecord
from core.errors import MissingIdentityError

USER_ID_HEADER = "x-user-id"
USER_TYPE_HEADER = "x-user-type"


@dataclass(frozen=True)
class CallerIdentity:
    id: str
    role: str


def _text(data: Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        # ObjectId del driver, ids numéricos...
        return str(value)
    return None


def as_user_record(user: BaseModel | Mapping[str, Any]) -> UserRecord:
    """Normaliza el usuario llamador (modelo o dict estilo backend)."""

    if isinstance(user, UserRecord):
        return user
    if isinstance(user, BaseModel):
        # Cuentas tipadas (TeacherUser, AdminUser...) devueltas por UserApi.
        data: Mapping[str, Any] = user.model_dump()
    else:
        data = user
    return UserRecord(
        id=_text(data, "_id", "id"),
        email=_text(data, "email"),
        name=_text(data, "name"),
        role=_text(data, "role"),
    )


def caller_identity(user: BaseModel | Mapping[str, Any], default_role: str) -> CallerIdentity:
    record = as_user_record(user)
    identity = record.id or record.email
    if not identity:
        raise MissingIdentityError("caller user has neither an id nor an email")
    return CallerIdentity(id=identity, role=record.role or default_role)


def build_auth_headers(user: BaseModel | Mapping[str, Any], default_role: str) -> dict[str, str]:
    identity = caller_identity(user, default_role)
    return {
        USER_ID_HEADER: identity.id,
        USER_TYPE_HEADER: identity.role,
    }
