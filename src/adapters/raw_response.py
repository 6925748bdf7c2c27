"""Adaptador httpx -> `RawResponse`.

Por qué un wrapper:
- `httpx.Response.text` reemplaza bytes inválidos en silencio; el mapper
  necesita saber cuándo el body no es texto.
- Unifica los errores de texto/JSON en `BodyDecodeError`.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from core.domain.errors import BodyDecodeError
from core.interfaces.response import RawResponse


class HttpxRawResponse(RawResponse):
    """`RawResponse` sobre una `httpx.Response` ya leída."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def response(self) -> httpx.Response:
        return self._response

    def body_as_string(self) -> str:
        # Sin charset declarado, `utf-8-sig` descarta un BOM inicial.
        encoding = self._response.charset_encoding or "utf-8-sig"
        try:
            return self._response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise BodyDecodeError(f"Response body is not valid {encoding} text") from exc

    def body_as_json(self) -> Any:
        text = self.body_as_string()
        if not text.strip():
            raise BodyDecodeError("Response body is empty")
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise BodyDecodeError(f"Response body is not valid JSON: {exc.msg}") from exc
        except RecursionError as exc:
            raise BodyDecodeError("Response body JSON is nested too deeply") from exc

    def __repr__(self) -> str:
        return f"<HttpxRawResponse [{self._response.status_code}]>"


def as_raw_response(value: Any) -> RawResponse:
    """Normaliza `httpx.Response` o cualquier `RawResponse` estructural."""

    if isinstance(value, httpx.Response):
        return HttpxRawResponse(value)
    if isinstance(value, RawResponse):
        return value
    raise TypeError(f"Expected an httpx.Response or RawResponse, got {type(value).__name__}")
