"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la forma de las respuestas del backend: un payload que no encaja con
  el modelo es un fallo de parseo y dispara el fallback.
- Serializa con los nombres del backend (`_id`, camelCase) sin ensuciar el
  código Python con ellos.

Nota:
- Estos modelos describen *qué* devuelve el backend, no *cómo* se obtiene.
- Las referencias a otros documentos (ObjectId) viajan como `str`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class UserRole(str, Enum):
    TEACHER = "teacher"
    ADMIN = "admin"
    STUDENT = "student"
    PARENT = "parent"
    ORGANIZATION = "organization"


class OrganizationType(str, Enum):
    SCHOOL = "school"
    UNIVERSITY = "university"
    TRAINING_CENTER = "training_center"
    CORPORATE = "corporate"
    NON_PROFIT = "non_profit"


class OrganizationStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ClassUserType(str, Enum):
    TEACHER = "teacher"
    ADMIN = "admin"
    PARENT = "parent"


class DomainModel(BaseModel):
    """Base común: alias camelCase del backend + claves extra ignoradas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Representación JSON con los nombres del backend."""

        return self.model_dump(mode="json", by_alias=True)


class Address(DomainModel):
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""


class EmergencyContact(DomainModel):
    name: str = ""
    relationship: str = ""
    phone: str = ""


class ContactInfo(DomainModel):
    email: str | None = None
    phone: str = ""
    contact_person: str | None = None


class NotificationPreferences(DomainModel):
    email: bool = True
    sms: bool = False
    push: bool = True


class Qualification(DomainModel):
    degree: str
    institution: str
    year: int
    specialization: str


class TimeSlot(DomainModel):
    start_time: str
    end_time: str


class UserRecord(DomainModel):
    """Usuario llamador tal como lo entrega la capa de sesión.

    Todos los campos son opcionales: el builder de headers decide qué falta.
    """

    id: str | None = Field(default=None, alias="_id")
    email: str | None = None
    name: str | None = None
    role: str | None = None
    email_verified: bool = False
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Admin(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    user_id: str
    permissions: list[str] = Field(default_factory=list)
    organization_id: str | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class Organization(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    name: str
    type: OrganizationType
    status: OrganizationStatus
    description: str | None = None
    website: str | None = None
    address: Address = Field(default_factory=Address)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    subscription: str | None = None
    teachers: list[str] = Field(default_factory=list)
    students: list[str] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list)
    classes: list[str] = Field(default_factory=list)
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class Parent(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    user_id: str
    children: list[str] = Field(default_factory=list)
    phone_number: str = ""
    address: Address = Field(default_factory=Address)
    emergency_contact: EmergencyContact | None = None
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class Student(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    user_id: str
    date_of_birth: datetime | None = None
    grade: int | None = None
    gender: Gender | None = None
    school_id: str | None = None
    parent_id: str | None = None
    enrolled_courses: list[str] = Field(default_factory=list)
    coins: int = 0
    coding_streak: int = 0
    last_coding_activity: datetime = EPOCH
    total_coins_earned: int = 0
    total_time_spent: int = 0
    goals: list[str] = Field(default_factory=list)
    subscription: str | None = None
    section: str | None = None
    emergency_contact: EmergencyContact | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class Teacher(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    user_id: str
    qualifications: list[Qualification] = Field(default_factory=list)
    availability: dict[str, list[TimeSlot]] = Field(default_factory=dict)
    rating: list[float] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list)
    organization_id: str | None = None
    languages: list[str] = Field(default_factory=list)
    subscription: str | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class ClassSettings(DomainModel):
    allow_student_enrollment: bool = True
    require_approval: bool = False
    auto_progress: bool = False


class ClassMetadata(DomainModel):
    grade: str | None = None
    subject: str | None = None
    level: str | None = None


class ClassCreator(DomainModel):
    user_id: str
    user_type: ClassUserType


class SchoolClass(DomainModel):
    """Clase (grupo de alumnos). `class` es palabra reservada, de ahí el nombre."""

    id: str | None = Field(default=None, alias="_id")
    class_name: str
    description: str | None = None
    created_by: ClassCreator
    organization_id: str | None = None
    courses: list[str] = Field(default_factory=list)
    students: list[str] = Field(default_factory=list)
    max_students: int | None = None
    is_active: bool = True
    start_date: datetime | None = None
    end_date: datetime | None = None
    settings: ClassSettings | None = None
    metadata: ClassMetadata | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class CreateClassRequest(DomainModel):
    class_name: str = Field(..., min_length=1)
    description: str | None = None
    courses: list[str] = Field(default_factory=list)
    students: list[str] = Field(default_factory=list)
    max_students: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    settings: ClassSettings | None = None
    metadata: ClassMetadata | None = None
    organization_id: str | None = None


# --- Usuarios: unión etiquetada por `role` -------------------------------


class _AccountBase(DomainModel):
    id: str | None = Field(default=None, alias="_id")
    email: str | None = None
    name: str = ""
    email_verified: bool = False
    image: str | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH


class TeacherUser(_AccountBase):
    role: Literal["teacher"] = "teacher"


class AdminUser(_AccountBase):
    role: Literal["admin"] = "admin"


class StudentUser(_AccountBase):
    role: Literal["student"] = "student"


class ParentUser(_AccountBase):
    role: Literal["parent"] = "parent"


class OrganizationUser(_AccountBase):
    # Registros antiguos usan "school" para el mismo rol.
    role: Literal["organization", "school"] = "organization"


User = Annotated[
    Union[TeacherUser, AdminUser, StudentUser, ParentUser, OrganizationUser],
    Field(discriminator="role"),
]

_USER_ADAPTER: TypeAdapter[Any] = TypeAdapter(User)


def parse_user(data: Any) -> TeacherUser | AdminUser | StudentUser | ParentUser | OrganizationUser:
    """Valida un payload de usuario y devuelve la variante según `role`."""

    return _USER_ADAPTER.validate_python(data)
