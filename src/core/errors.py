"""Errores del cliente.

Solo `ConfigurationError` y `MissingIdentityError` llegan al llamador.
`TransportFailure` se absorbe en `core.services.fallback` y se convierte en un
objeto por defecto.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base de todos los errores propios del cliente."""


class ConfigurationError(ClientError):
    """La base URL del backend no está configurada."""


class MissingIdentityError(ClientError):
    """El usuario llamador no tiene ni `id` ni `email`."""


class TransportFailure(ClientError):
    """Fallo de red, HTTP no-2xx o respuesta no parseable.

    `kind` distingue la causa para el logging:
    - `network`: DNS, timeout, conexión reseteada.
    - `http_status`: respuesta no-2xx (ver `status_code`).
    - `parse`: cuerpo que no es JSON o no encaja con el modelo esperado.
    """

    NETWORK = "network"
    HTTP_STATUS = "http_status"
    PARSE = "parse"

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.url = url

    @property
    def is_not_found(self) -> bool:
        return self.kind == self.HTTP_STATUS and self.status_code == 404

    def describe(self) -> str:
        if self.kind == self.HTTP_STATUS:
            if self.is_not_found:
                return "resource not found (HTTP 404)"
            return f"HTTP {self.status_code}"
        if self.kind == self.NETWORK:
            return "backend unreachable"
        return "unparseable response"
