"""Errores del mapeo respuesta -> modelo.

Política de payload:
- En modo debug, `MapError` guarda el JSON crudo que no se pudo mapear.
- En release, el payload se descarta al construir el error, para no filtrar
  cuerpos de respuesta en logs/errores de producción.
"""

from __future__ import annotations

from typing import Any

from core.config import AppSettings, get_settings


def _type_name(model_type: Any) -> str | None:
    if model_type is None:
        return None
    if getattr(model_type, "__args__", None):
        # Genéricos como list[User].
        return repr(model_type)
    return getattr(model_type, "__name__", None) or repr(model_type)


class ResponseMappingError(Exception):
    """Base de todos los errores de este paquete."""


class BodyDecodeError(ResponseMappingError):
    """El body de la respuesta no es texto válido o no es JSON válido."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class MapError(ResponseMappingError):
    """No se pudo decodificar el body al tipo de modelo pedido."""

    default_message = "Failed to map response body to model"

    def __init__(
        self,
        payload: str | None = None,
        *,
        model_type: Any = None,
        designated_path: str | None = None,
    ) -> None:
        self.payload = payload
        self.model_type = model_type
        self.designated_path = designated_path
        super().__init__(str(self))

    @classmethod
    def from_body(
        cls,
        body: str,
        *,
        model_type: Any = None,
        designated_path: str | None = None,
        settings: AppSettings | None = None,
    ) -> MapError:
        """Crea el error aplicando la política de payload del modo de build."""

        settings = settings or get_settings()
        return cls(
            body if settings.debug else None,
            model_type=model_type,
            designated_path=designated_path,
        )

    @property
    def description(self) -> str | None:
        if self.payload is None:
            return None
        return f"Failed to map to model object. {self.payload}"

    def __str__(self) -> str:
        message = self.default_message
        name = _type_name(self.model_type)
        if name:
            message = f"{message} {name}"
        if self.designated_path:
            message = f"{message} at '{self.designated_path}'"
        if self.description:
            message = f"{message}: {self.description}"
        return message
