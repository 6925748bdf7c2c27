"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen las respuestas HTTP y los modelos.
- Permite invertir dependencias: el mapper depende de capacidades, no de herencia.
"""

from core.interfaces.decodable import Decodable
from core.interfaces.response import RawResponse

__all__ = [
    "Decodable",
    "RawResponse",
]
