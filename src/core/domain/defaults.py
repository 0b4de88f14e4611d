"""Objetos por defecto (fallback) por tipo de recurso.

Por qué existe:
- Cuando el backend falla, la UI recibe un objeto con la misma forma que una
  respuesta real y no tiene que ramificar por errores de transporte.
- Todas las funciones son puras: misma entrada => misma salida. Las fechas son
  el epoch fijo y las referencias que no se conocen quedan en `None`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pydantic import BaseModel

from core.domain.models import (
    EPOCH,
    Address,
    Admin,
    ClassCreator,
    ClassSettings,
    ClassUserType,
    ContactInfo,
    CreateClassRequest,
    EmergencyContact,
    Gender,
    NotificationPreferences,
    Organization,
    OrganizationStatus,
    OrganizationType,
    Parent,
    SchoolClass,
    Student,
    Teacher,
    TeacherUser,
    UserRecord,
)

DEFAULT_ADMIN_PERMISSIONS = ("read", "write", "delete")
DEFAULT_ORGANIZATION_NAME = "Default Organization"
MOCK_CLASS_ID = "mock-class-id"


class ResourceType(str, Enum):
    ADMIN = "admin"
    ORGANIZATION = "organization"
    PARENT = "parent"
    STUDENT = "student"
    TEACHER = "teacher"
    USER = "user"


@dataclass(frozen=True)
class FallbackContext:
    """Entrada del sintetizador.

    - `requested_id`: id pedido (o `default` para lookups `/me` sin id).
    - `caller_user`: usuario llamador (aporta email/nombre).
    - `owner_id`: valor de `userId`; si falta se usa `requested_id`.
    """

    requested_id: str
    caller_user: UserRecord
    owner_id: str | None = None

    @property
    def user_id(self) -> str:
        return self.owner_id or self.requested_id

    @classmethod
    def for_current(cls, caller: UserRecord) -> "FallbackContext":
        """Contexto para `/me`: id del llamador o `default`, userId = id o email."""

        return cls(
            requested_id=caller.id or "default",
            caller_user=caller,
            owner_id=caller.id or caller.email,
        )


def _admin(ctx: FallbackContext) -> Admin:
    return Admin(
        id=ctx.requested_id,
        user_id=ctx.user_id,
        permissions=list(DEFAULT_ADMIN_PERMISSIONS),
        organization_id=None,
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def _organization(ctx: FallbackContext) -> Organization:
    return Organization(
        id=ctx.requested_id,
        name=DEFAULT_ORGANIZATION_NAME,
        type=OrganizationType.SCHOOL,
        status=OrganizationStatus.ACTIVE,
        description="Default organization",
        website="",
        address=Address(),
        contact_info=ContactInfo(
            email=ctx.caller_user.email,
            phone="",
            contact_person=ctx.caller_user.name,
        ),
        subscription=None,
        teachers=[],
        students=[],
        courses=[],
        classes=[],
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def _parent(ctx: FallbackContext) -> Parent:
    return Parent(
        id=ctx.requested_id,
        user_id=ctx.user_id,
        children=[],
        phone_number="",
        address=Address(),
        emergency_contact=EmergencyContact(),
        notification_preferences=NotificationPreferences(email=True, sms=False, push=True),
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def _student(ctx: FallbackContext) -> Student:
    return Student(
        id=ctx.requested_id,
        user_id=ctx.user_id,
        date_of_birth=EPOCH,
        grade=1,
        gender=Gender.OTHER,
        enrolled_courses=[],
        coins=0,
        coding_streak=0,
        last_coding_activity=EPOCH,
        total_coins_earned=0,
        total_time_spent=0,
        goals=[],
        subscription="free",
        section="A",
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def _teacher(ctx: FallbackContext) -> Teacher:
    return Teacher(
        id=ctx.requested_id,
        user_id=ctx.user_id,
        qualifications=[],
        availability={},
        rating=[],
        courses=[],
        organization_id=None,
        languages=[],
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def _user(ctx: FallbackContext) -> TeacherUser:
    email = ctx.requested_id
    return TeacherUser(
        id=email,
        email=email,
        name=email.split("@")[0],
        email_verified=True,
        created_at=EPOCH,
        updated_at=EPOCH,
    )


@dataclass(frozen=True)
class ResourceDescriptor:
    """Par (modelo, fábrica de fallback) estático por tipo de recurso."""

    resource_type: ResourceType
    default_role: str
    model: type[BaseModel]
    factory: Callable[[FallbackContext], BaseModel]


DESCRIPTORS: dict[ResourceType, ResourceDescriptor] = {
    ResourceType.ADMIN: ResourceDescriptor(ResourceType.ADMIN, "admin", Admin, _admin),
    ResourceType.ORGANIZATION: ResourceDescriptor(
        ResourceType.ORGANIZATION, "organization", Organization, _organization
    ),
    ResourceType.PARENT: ResourceDescriptor(ResourceType.PARENT, "parent", Parent, _parent),
    ResourceType.STUDENT: ResourceDescriptor(ResourceType.STUDENT, "student", Student, _student),
    ResourceType.TEACHER: ResourceDescriptor(ResourceType.TEACHER, "teacher", Teacher, _teacher),
    ResourceType.USER: ResourceDescriptor(ResourceType.USER, "teacher", TeacherUser, _user),
}


def get_descriptor(resource_type: ResourceType | str) -> ResourceDescriptor:
    return DESCRIPTORS[ResourceType(resource_type)]


def synthesize(resource_type: ResourceType | str, ctx: FallbackContext) -> BaseModel:
    """Construye el objeto por defecto para `resource_type`."""

    return get_descriptor(resource_type).factory(ctx)


def synthesize_class(request: CreateClassRequest, caller: UserRecord) -> SchoolClass:
    """Clase "creada" localmente cuando el backend no responde.

    Copia lo pedido y completa el resto con valores por defecto.
    """

    return SchoolClass(
        id=MOCK_CLASS_ID,
        class_name=request.class_name,
        description=request.description or "",
        created_by=ClassCreator(
            user_id=caller.id or caller.email or "",
            user_type=ClassUserType.TEACHER,
        ),
        organization_id=request.organization_id,
        courses=list(request.courses),
        students=list(request.students),
        max_students=request.max_students,
        is_active=True,
        start_date=request.start_date,
        end_date=request.end_date,
        settings=request.settings or ClassSettings(),
        metadata=request.metadata,
        created_at=EPOCH,
        updated_at=EPOCH,
    )
