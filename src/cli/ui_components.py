"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import BaseModel
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.json_exporter import resource_payload
from core.domain.models import SchoolClass


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("beblocky-client", style="bold cyan")
    subtitle = Text("Admin • Organizations • Teachers • Students • Parents", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _format_value(value: object) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "-"
    return str(value)


def build_resource_table(resource: BaseModel, *, title: str) -> Table:
    """Tabla campo/valor con los nombres del backend."""

    table = Table(title=title)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in resource_payload(resource).items():
        table.add_row(key, _format_value(value))
    return table


def build_classes_table(classes: Sequence[SchoolClass]) -> Table:
    table = Table(title="Classes")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Students", style="green", justify="right")
    table.add_column("Courses", style="green", justify="right")
    table.add_column("Active", style="magenta")
    for item in classes:
        table.add_row(
            item.id or "-",
            item.class_name,
            str(len(item.students)),
            str(len(item.courses)),
            "yes" if item.is_active else "no",
        )
    return table
