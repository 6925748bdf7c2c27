"""Modelos y respuestas de prueba."""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import BaseModel


class User(BaseModel):
    id: int
    name: str


class StubResponse:
    """RawResponse estructural, sin httpx."""

    def __init__(self, body: str) -> None:
        self.body = body

    def body_as_string(self) -> str:
        return self.body

    def body_as_json(self) -> Any:
        return json.loads(self.body)


def make_response(body: str | bytes, status_code: int = 200, content_type: str = "application/json") -> httpx.Response:
    content = body.encode("utf-8") if isinstance(body, str) else body
    return httpx.Response(status_code, content=content, headers={"Content-Type": content_type})
