"""CLI principal (Typer).

Por qué una CLI:
- Permite inspeccionar lo que el dashboard recibiría del backend (incluido el
  objeto por defecto cuando el backend no responde) sin levantar la UI.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer
from pydantic import BaseModel
from rich.console import Console

from adapters.api_client import ApiClient
from adapters.json_exporter import dumps_resource, export_resource_json
from cli import doctor
from cli.ui_components import build_classes_table, build_resource_table, print_banner
from core.config import AppSettings
from core.domain.models import UserRecord
from core.errors import ConfigurationError, MissingIdentityError
from core.logging_utils import configure_logging


app = typer.Typer(no_args_is_help=True, help="Resilient client for the education platform backend.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


class ResourceChoice(str, Enum):
    ADMIN = "admin"
    ORGANIZATION = "organization"
    PARENT = "parent"
    STUDENT = "student"
    TEACHER = "teacher"
    USER = "user"


def build_client(settings: AppSettings) -> ApiClient:
    """Factory del cliente (los tests la sustituyen para inyectar un transporte)."""

    return ApiClient(settings)


def _caller(email: str | None, user_id: str | None, role: str | None, name: str | None) -> UserRecord:
    return UserRecord(id=user_id, email=email, role=role, name=name)


def _run(call: Callable[[ApiClient], Awaitable[Any]]) -> Any:
    settings = AppSettings()

    async def _main() -> Any:
        async with build_client(settings) as api:
            return await call(api)

    try:
        return asyncio.run(_main())
    except (ConfigurationError, MissingIdentityError) as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc


def _emit(result: BaseModel | list | None, *, title: str, as_json: bool, output: Path | None) -> None:
    if output is not None:
        path = export_resource_json(resource=result, output_path=output)
        _console.print(f"[green]Saved to:[/green] {path}")
        return
    if as_json:
        typer.echo(dumps_resource(result))
        return
    if isinstance(result, BaseModel):
        _console.print(build_resource_table(result, title=title))
    elif isinstance(result, list):
        _console.print(build_classes_table(result))


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default from settings)."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)
    if banner:
        print_banner(_console)


@app.command()
def get(
    resource: ResourceChoice = typer.Argument(..., help="Resource type to fetch."),
    email: Optional[str] = typer.Option(None, "--email", help="Caller email."),
    caller_id: Optional[str] = typer.Option(None, "--id", help="Caller user id."),
    role: Optional[str] = typer.Option(None, "--role", help="Caller role (x-user-type)."),
    name: Optional[str] = typer.Option(None, "--name", help="Caller display name."),
    user_id: Optional[str] = typer.Option(None, "--user-id", help="Look up by user id instead of /me."),
    lookup_email: Optional[str] = typer.Option(
        None, "--lookup-email", help="Look up by email (student and user only)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Fetch one resource; falls back to the default object if the backend fails."""

    caller = _caller(email, caller_id, role, name)

    def call(api: ApiClient) -> Awaitable[Any]:
        if resource is ResourceChoice.USER:
            if lookup_email:
                return api.users.get_user_by_email(lookup_email)
            return api.users.get_current_user(caller)
        if resource is ResourceChoice.STUDENT and lookup_email:
            return api.students.get_student_by_email(lookup_email, caller)
        if lookup_email:
            raise typer.BadParameter("--lookup-email only applies to student and user")

        api_for = {
            ResourceChoice.ADMIN: (api.admins.get_admin_by_user_id, api.admins.get_current_admin),
            ResourceChoice.ORGANIZATION: (
                api.organizations.get_organization_by_user_id,
                api.organizations.get_current_organization,
            ),
            ResourceChoice.PARENT: (api.parents.get_parent_by_user_id, api.parents.get_current_parent),
            ResourceChoice.STUDENT: (api.students.get_student_by_user_id, api.students.get_current_student),
            ResourceChoice.TEACHER: (api.teachers.get_teacher_by_user_id, api.teachers.get_current_teacher),
        }
        by_user_id, current = api_for[resource]
        if user_id:
            return by_user_id(user_id, caller)
        return current(caller)

    result = _run(call)
    _emit(result, title=resource.value.capitalize(), as_json=as_json, output=output)


@app.command(name="create-teacher")
def create_teacher(
    user_id: str = typer.Argument(..., help="User id to promote to teacher."),
    email: Optional[str] = typer.Option(None, "--email", help="Caller email."),
    caller_id: Optional[str] = typer.Option(None, "--id", help="Caller user id."),
    role: Optional[str] = typer.Option(None, "--role", help="Caller role (x-user-type)."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Create the teacher profile of an existing user."""

    caller = _caller(email, caller_id, role, None)
    result = _run(lambda api: api.teachers.create_teacher_from_user(user_id, caller))
    _emit(result, title="Teacher", as_json=as_json, output=None)


@app.command()
def classes(
    email: Optional[str] = typer.Option(None, "--email", help="Caller email."),
    caller_id: Optional[str] = typer.Option(None, "--id", help="Caller user id."),
    role: Optional[str] = typer.Option(None, "--role", help="Caller role (x-user-type)."),
    creator_id: Optional[str] = typer.Option(None, "--creator-id"),
    organization_id: Optional[str] = typer.Option(None, "--organization-id"),
    course_id: Optional[str] = typer.Option(None, "--course-id"),
    student_id: Optional[str] = typer.Option(None, "--student-id"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List classes (empty list if the backend fails)."""

    caller = _caller(email, caller_id, role, None)
    result = _run(
        lambda api: api.classes.get_classes(
            caller,
            creator_id=creator_id,
            organization_id=organization_id,
            course_id=course_id,
            student_id=student_id,
        )
    )
    _emit(result, title="Classes", as_json=as_json, output=None)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
