"""Contrato de modelos decodificables.

Por qué Protocol:
- Un tipo es decodificable por capacidad (tiene `deserialize`), no por herencia.
- Los modelos pydantic no necesitan implementarlo: el adaptador de
  deserialización usa `TypeAdapter` como estrategia por defecto.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Decodable(Protocol):
    """Tipo que sabe construirse desde JSON y volver a JSON."""

    @classmethod
    def deserialize(cls, json_string: str, designated_path: str | None = None) -> Any | None:
        """Devuelve una instancia completa o `None` si el JSON no encaja."""

        ...

    def to_json(self) -> Any | None:
        """Representación JSON (dict/list/...) o `None` si no se puede serializar."""

        ...
