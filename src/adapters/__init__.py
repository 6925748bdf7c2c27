"""Adaptadores: httpx (respuestas), pydantic (modelos) y asyncio (productores).

Cada módulo implementa una pieza del mapeo respuesta -> modelo sobre los
contratos de `core.interfaces`.
"""

from adapters.async_mapping import map_single, map_single_list, map_stream, map_stream_list
from adapters.debug_echo import debug_json_single, debug_json_stream
from adapters.deserialization import register_decoder, unregister_decoder
from adapters.http_client import build_async_client
from adapters.raw_response import HttpxRawResponse, as_raw_response
from adapters.response_mapper import map_model, map_models

__all__ = [
	"HttpxRawResponse",
	"as_raw_response",
	"build_async_client",
	"debug_json_single",
	"debug_json_stream",
	"map_model",
	"map_models",
	"map_single",
	"map_single_list",
	"map_stream",
	"map_stream_list",
	"register_decoder",
	"unregister_decoder",
]
