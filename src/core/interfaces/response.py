"""Contrato de respuesta HTTP cruda.

Por qué Protocol:
- El mapper solo necesita leer el body como texto o como JSON.
- Cualquier objeto con esos dos métodos sirve (httpx, stubs de test, etc.).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RawResponse(Protocol):
    """Respuesta HTTP completada, de solo lectura para el mapper.

    Reglas:
    - `body_as_string` lanza `BodyDecodeError` si el body no es texto válido.
    - `body_as_json` lanza `BodyDecodeError` si el body no es JSON válido.
    """

    def body_as_string(self) -> str:
        ...

    def body_as_json(self) -> Any:
        ...
