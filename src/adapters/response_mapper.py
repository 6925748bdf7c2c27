"""Mapeo síncrono respuesta -> modelo.

Por qué en adapters:
- Es el punto donde se juntan la capa HTTP (httpx) y la de modelos (pydantic).
- Funciones puras: no mutan la respuesta ni guardan estado.
"""

from __future__ import annotations

from typing import Any, TypeVar

from adapters.deserialization import deserialize, deserialize_list
from adapters.raw_response import as_raw_response
from core.config import AppSettings
from core.domain.errors import MapError

D = TypeVar("D")


def map_model(
    response: Any,
    model_type: type[D],
    designated_path: str | None = None,
    *,
    settings: AppSettings | None = None,
) -> D:
    """Decodifica el body de `response` como una instancia de `model_type`.

    Lanza:
    - `BodyDecodeError` si el body no es texto.
    - `MapError` si el JSON no encaja con `model_type` (o con el subárbol
      en `designated_path`).
    """

    json_string = as_raw_response(response).body_as_string()
    obj = deserialize(model_type, json_string, designated_path)
    if obj is not None:
        return obj
    raise MapError.from_body(
        json_string,
        model_type=model_type,
        designated_path=designated_path,
        settings=settings,
    )


def map_models(
    response: Any,
    model_type: type[D],
    designated_path: str | None = None,
    *,
    settings: AppSettings | None = None,
) -> list[D]:
    """Igual que `map_model` pero para un array JSON: todo o `MapError`."""

    json_string = as_raw_response(response).body_as_string()
    objs = deserialize_list(model_type, json_string, designated_path)
    if objs is not None:
        return objs
    raise MapError.from_body(
        json_string,
        model_type=list[model_type],  # type: ignore[valid-type]
        designated_path=designated_path,
        settings=settings,
    )
