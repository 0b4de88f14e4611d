"""Clientes de recursos del backend.

Por qué un paquete:
- Agrupa un módulo por recurso (admin, organización, padre, alumno, profesor,
  usuario, clase).
- Todos comparten `ResourceApi` y el mismo fetch con fallback.
"""

from adapters.resources.admin import AdminApi
from adapters.resources.base import ResourceApi
from adapters.resources.classes import ClassApi
from adapters.resources.organization import OrganizationApi
from adapters.resources.parent import ParentApi
from adapters.resources.student import StudentApi
from adapters.resources.teacher import TeacherApi
from adapters.resources.user import UserApi

__all__ = [
	"AdminApi",
	"ClassApi",
	"OrganizationApi",
	"ParentApi",
	"ResourceApi",
	"StudentApi",
	"TeacherApi",
	"UserApi",
]
