"""Exportación JSON de recursos.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Usa los nombres del backend (`_id`, camelCase) para que el fichero se pueda
  reenviar tal cual.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel


def resource_payload(resource: BaseModel | Sequence[BaseModel] | None) -> Any:
    if resource is None:
        return None
    if isinstance(resource, BaseModel):
        return resource.model_dump(mode="json", by_alias=True)
    return [item.model_dump(mode="json", by_alias=True) for item in resource]


def dumps_resource(resource: BaseModel | Sequence[BaseModel] | None) -> str:
    """JSON UTF-8 con formato estable (claves ordenadas)."""

    return json.dumps(resource_payload(resource), ensure_ascii=False, indent=2, sort_keys=True)


def export_resource_json(*, resource: BaseModel | Sequence[BaseModel] | None, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_resource(resource) + "\n", encoding="utf-8")
    return output_path
