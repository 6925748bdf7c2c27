"""Estrategias de deserialización (pydantic v2 + registro de decoders).

Resolución por capacidad, en este orden:
1. Decoder registrado explícitamente con `register_decoder`.
2. Tipo que cumple `core.interfaces.decodable.Decodable` (`deserialize`/`to_json`).
3. `pydantic.TypeAdapter` (BaseModel, dataclasses, TypedDict, primitivos...).

Contrato común: `None` significa "no encaja". Nunca se devuelven instancias
a medio poblar ni listas parciales.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, TypeAdapter

from core.interfaces.decodable import Decodable
from core.logging import get_logger

T = TypeVar("T")

Decoder = Callable[[str, "str | None"], Any]

_logger = get_logger(__name__)
_decoders: dict[Any, Decoder] = {}


def register_decoder(model_type: Any, decoder: Decoder) -> None:
    """Registra `decoder(json_string, designated_path) -> instancia | None` para un tipo."""

    _decoders[model_type] = decoder


def unregister_decoder(model_type: Any) -> None:
    _decoders.pop(model_type, None)


def select_designated_path(document: Any, designated_path: str | None) -> Any:
    """Baja por claves separadas por puntos (`"data.items"`).

    Los segmentos en blanco se ignoran. Lanza `KeyError` si una clave no
    existe o si un nivel intermedio no es un objeto JSON.
    """

    if designated_path is None:
        return document
    current = document
    for segment in designated_path.split("."):
        if not segment.strip():
            continue
        if not isinstance(current, dict) or segment not in current:
            raise KeyError(designated_path)
        current = current[segment]
    return current


def _custom_decoder(model_type: Any) -> Decoder | None:
    try:
        decoder = _decoders.get(model_type)
    except TypeError:
        decoder = None
    if decoder is not None:
        return decoder
    if isinstance(model_type, type) and isinstance(model_type, Decodable):
        return model_type.deserialize
    return None


def _build_type_adapter(model_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model_type)


_cached_type_adapter = lru_cache(maxsize=256)(_build_type_adapter)


def _type_adapter(model_type: Any) -> TypeAdapter[Any]:
    try:
        hash(model_type)
    except TypeError:
        # Tipos no hashables: sin caché.
        return _build_type_adapter(model_type)
    return _cached_type_adapter(model_type)


def _load_subtree(json_string: str, designated_path: str | None) -> Any:
    document = json.loads(json_string)
    return select_designated_path(document, designated_path)


def _call_decoder(decoder: Decoder, json_string: str, designated_path: str | None) -> Any | None:
    try:
        return decoder(json_string, designated_path)
    except (ValueError, TypeError, KeyError, RecursionError):
        return None


def deserialize(model_type: type[T], json_string: str, designated_path: str | None = None) -> T | None:
    """Decodifica una instancia de `model_type` (o `None` si no encaja)."""

    decoder = _custom_decoder(model_type)
    if decoder is not None:
        return _call_decoder(decoder, json_string, designated_path)

    try:
        subtree = _load_subtree(json_string, designated_path)
        return _type_adapter(model_type).validate_python(subtree)
    except (ValueError, KeyError, RecursionError) as exc:
        # pydantic.ValidationError y json.JSONDecodeError son ValueError;
        # RecursionError llega con JSON demasiado anidado.
        _logger.debug(
            "model_decode_failed",
            model=getattr(model_type, "__name__", repr(model_type)),
            designated_path=designated_path,
            body_length=len(json_string),
            error_type=type(exc).__name__,
        )
        return None


def deserialize_list(
    model_type: type[T],
    json_string: str,
    designated_path: str | None = None,
) -> list[T] | None:
    """Decodifica un array JSON de `model_type`, todo o nada."""

    decoder = _custom_decoder(model_type)
    try:
        subtree = _load_subtree(json_string, designated_path)
        if decoder is None:
            return _type_adapter(list[model_type]).validate_python(subtree)  # type: ignore[valid-type]
    except (ValueError, KeyError, RecursionError) as exc:
        _logger.debug(
            "model_decode_failed",
            model=f"list[{getattr(model_type, '__name__', repr(model_type))}]",
            designated_path=designated_path,
            body_length=len(json_string),
            error_type=type(exc).__name__,
        )
        return None

    if not isinstance(subtree, list):
        return None
    items: list[T] = []
    for element in subtree:
        item = _call_decoder(decoder, json.dumps(element, ensure_ascii=False), None)
        if item is None:
            return None
        items.append(item)
    return items


def to_json_object(instance: Any) -> Any | None:
    """Vuelve a convertir un modelo en estructura JSON (o `None` si falla)."""

    try:
        if isinstance(instance, Decodable):
            return instance.to_json()
        if isinstance(instance, BaseModel):
            return instance.model_dump(mode="json")
        return _type_adapter(type(instance)).dump_python(instance, mode="json")
    except Exception:
        # Tipos sin esquema pydantic o `to_json` propios que fallan: el eco usa `{}`.
        return None
