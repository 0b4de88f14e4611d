"""Contrato del fetcher de recursos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el fetcher HTTP por un doble de test sin acoplar el Core
  a httpx.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ResourceFetcher(Protocol):
    """Contrato mínimo para traer un recurso del backend.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP).
    - Un único intento: sin reintentos, sin caché.
    - Todo fallo (red, HTTP no-2xx, cuerpo no-JSON) se reporta como
      `core.errors.TransportFailure`.
    """

    async def fetch(
        self,
        url: str,
        headers: Mapping[str, str],
        *,
        method: str = "GET",
        json_body: Any = None,
    ) -> Any:
        """Ejecuta la petición y devuelve el JSON decodificado (o None si no hay cuerpo)."""

        ...
