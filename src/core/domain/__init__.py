"""Entidades y errores del dominio.

Por qué:
- Aquí viven los conceptos del problema (errores de mapeo, path designado).
- El dominio no conoce httpx, pydantic ni asyncio.
"""

from core.domain.errors import BodyDecodeError, MapError, ResponseMappingError

__all__ = [
    "BodyDecodeError",
    "MapError",
    "ResponseMappingError",
]
