"""Wrappers asíncronos (asyncio) sobre el mapper.

Modelo de ejecución:
- Foreground: el event loop que consume el valor.
- Background: un executor de hilos donde corre la decodificación.
- Orden fijo por valor: `decode (background) -> redelivery (foreground)`.

Productores soportados:
- Un solo valor: cualquier awaitable que resuelva a una respuesta.
- Múltiples valores: cualquier async iterable de respuestas.

La cancelación es la de asyncio: cancelar la tarea consumidora cancela el
await del upstream, y si la decodificación aún no ha empezado no llega a
correr. No hay reintentos.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from functools import partial
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, Callable, TypeVar

from adapters.response_mapper import map_model, map_models
from core.config import AppSettings, get_settings

D = TypeVar("D")
R = TypeVar("R")

BACKGROUND_THREAD_PREFIX = "model-decode"

_executors: dict[int, ThreadPoolExecutor] = {}
_executor_lock = threading.Lock()


def get_background_executor(settings: AppSettings | None = None) -> Executor:
    """Executor compartido para decodificar, uno por `decode_workers`.

    Se crea en el primer uso; settings con otro número de hilos obtienen
    su propio executor.
    """

    settings = settings or get_settings()
    workers = settings.decode_workers
    with _executor_lock:
        executor = _executors.get(workers)
        if executor is None:
            executor = ThreadPoolExecutor(
                max_workers=workers,
                thread_name_prefix=BACKGROUND_THREAD_PREFIX,
            )
            _executors[workers] = executor
        return executor


def shutdown_background_executor(wait: bool = True) -> None:
    with _executor_lock:
        executors = list(_executors.values())
        _executors.clear()
    for executor in executors:
        executor.shutdown(wait=wait)


async def close_async_iterator(iterator: Any) -> None:
    """Cierra el upstream si es un async generator (o algo con `aclose`)."""

    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()


async def _run_in_background(
    func: Callable[..., R],
    executor: Executor | None,
    settings: AppSettings,
    *args: Any,
) -> R:
    loop = asyncio.get_running_loop()
    executor = executor or get_background_executor(settings)
    # El await reanuda en el loop: esa es la entrega en foreground.
    return await loop.run_in_executor(executor, partial(func, *args, settings=settings))


async def map_single(
    source: Awaitable[Any],
    model_type: type[D],
    designated_path: str | None = None,
    *,
    executor: Executor | None = None,
    settings: AppSettings | None = None,
) -> D:
    """Espera la respuesta de `source` y la decodifica como `model_type`."""

    settings = settings or get_settings()
    response = await source
    return await _run_in_background(map_model, executor, settings, response, model_type, designated_path)


async def map_single_list(
    source: Awaitable[Any],
    model_type: type[D],
    designated_path: str | None = None,
    *,
    executor: Executor | None = None,
    settings: AppSettings | None = None,
) -> list[D]:
    """Como `map_single`, pero para un array JSON de `model_type`."""

    settings = settings or get_settings()
    response = await source
    return await _run_in_background(map_models, executor, settings, response, model_type, designated_path)


async def map_stream(
    source: AsyncIterable[Any],
    model_type: type[D],
    designated_path: str | None = None,
    *,
    executor: Executor | None = None,
    settings: AppSettings | None = None,
) -> AsyncIterator[D]:
    """Decodifica cada respuesta del stream, en orden.

    Un `MapError` termina el stream: se propaga desde `__anext__`.
    """

    settings = settings or get_settings()
    iterator = aiter(source)
    try:
        async for response in iterator:
            yield await _run_in_background(map_model, executor, settings, response, model_type, designated_path)
    finally:
        await close_async_iterator(iterator)


async def map_stream_list(
    source: AsyncIterable[Any],
    model_type: type[D],
    designated_path: str | None = None,
    *,
    executor: Executor | None = None,
    settings: AppSettings | None = None,
) -> AsyncIterator[list[D]]:
    settings = settings or get_settings()
    iterator = aiter(source)
    try:
        async for response in iterator:
            yield await _run_in_background(map_models, executor, settings, response, model_type, designated_path)
    finally:
        await close_async_iterator(iterator)
