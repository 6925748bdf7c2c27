"""Operador de debug: imprime el JSON que pasa por un productor.

Por qué un operador y no logging:
- Es un eco puntual para desarrollo, con la procedencia (fichero/función/línea)
  de quien lo aplicó, como un `print` etiquetado.
- En release devuelve el productor tal cual: cero I/O, cero trabajo.

Nunca lanza ni corta el productor por un fallo al renderizar o imprimir.
"""

from __future__ import annotations

import inspect
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, TypeVar

import httpx
from rich.console import Console

from adapters.async_mapping import close_async_iterator
from adapters.deserialization import to_json_object
from adapters.raw_response import as_raw_response
from core.config import AppSettings, get_settings
from core.domain.errors import BodyDecodeError
from core.interfaces.response import RawResponse
from core.logging import get_logger

T = TypeVar("T")

_console = Console(soft_wrap=True, highlight=False)
_logger = get_logger(__name__)


@dataclass(frozen=True)
class CallerProvenance:
    """Dónde se aplicó el operador (para la línea de diagnóstico)."""

    file: str
    function: str
    line: int

    @classmethod
    def capture(cls, skip: int = 1) -> CallerProvenance:
        """Toma la procedencia `skip` frames por encima de quien llama a `capture`."""

        frame = inspect.currentframe()
        try:
            for _ in range(skip + 1):
                if frame is None or frame.f_back is None:
                    break
                frame = frame.f_back
            if frame is None:
                return cls(file="<unknown>", function="<unknown>", line=0)
            return cls(
                file=Path(frame.f_code.co_filename).name,
                function=frame.f_code.co_name,
                line=frame.f_lineno,
            )
        finally:
            del frame


def _model_json(value: Any) -> Any:
    rendered = to_json_object(value)
    return {} if rendered is None else rendered


def render_value(value: Any) -> Any | None:
    """JSON a imprimir para `value`.

    - Respuesta cruda: el body como JSON, o `None` si no es JSON.
    - Modelo (o lista de modelos): su serialización, `{}` si falla.
    """

    if isinstance(value, (httpx.Response, RawResponse)):
        try:
            return as_raw_response(value).body_as_json()
        except BodyDecodeError:
            return None
    if isinstance(value, list):
        return [_model_json(item) for item in value]
    return _model_json(value)


def format_debug_line(json_value: Any | None, provenance: CallerProvenance) -> str:
    env = f"🔺DEBUGJSON: {provenance.file}[{provenance.line}], {provenance.function}🔺"
    if json_value is None:
        return env
    return f"{env} {json.dumps(json_value, ensure_ascii=False, default=str)}"


def debug_json(value: Any, provenance: CallerProvenance, *, console: Console | None = None) -> None:
    """Imprime una línea de diagnóstico para `value`. No lanza."""

    try:
        line = format_debug_line(render_value(value), provenance)
        (console or _console).print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
    except Exception:
        _logger.warning("debug_echo_failed", value_type=type(value).__name__, exc_info=True)


def debug_json_single(
    source: Awaitable[T],
    *,
    settings: AppSettings | None = None,
    console: Console | None = None,
    provenance: CallerProvenance | None = None,
) -> Awaitable[T]:
    """Eco del valor de un productor de un solo valor.

    En release devuelve `source` sin tocarlo.
    """

    settings = settings or get_settings()
    if not settings.debug:
        return source
    provenance = provenance or CallerProvenance.capture()

    async def echo() -> T:
        value = await source
        debug_json(value, provenance, console=console)
        return value

    return echo()


def debug_json_stream(
    source: AsyncIterable[T],
    *,
    settings: AppSettings | None = None,
    console: Console | None = None,
    provenance: CallerProvenance | None = None,
) -> AsyncIterable[T]:
    """Eco de cada valor de un stream. En release devuelve `source` sin tocarlo."""

    settings = settings or get_settings()
    if not settings.debug:
        return source
    provenance = provenance or CallerProvenance.capture()
    return _echo_stream(source, provenance, console)


async def _echo_stream(
    source: AsyncIterable[T],
    provenance: CallerProvenance,
    console: Console | None,
) -> AsyncIterator[T]:
    iterator = aiter(source)
    try:
        async for value in iterator:
            debug_json(value, provenance, console=console)
            yield value
    finally:
        await close_async_iterator(iterator)
