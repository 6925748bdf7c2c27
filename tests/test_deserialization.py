"""Tests de las estrategias de deserialización."""

import json
from dataclasses import dataclass

import pytest

from adapters.deserialization import (
    deserialize,
    deserialize_list,
    register_decoder,
    select_designated_path,
    to_json_object,
    unregister_decoder,
)
from tests.helpers import User


class Point:
    """Decodable por capacidad, sin pydantic."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __eq__(self, other):
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)

    @classmethod
    def deserialize(cls, json_string, designated_path=None):
        data = select_designated_path(json.loads(json_string), designated_path)
        if not isinstance(data, dict) or not all(isinstance(data.get(k), int) for k in ("x", "y")):
            return None
        return cls(data["x"], data["y"])

    def to_json(self):
        return {"x": self.x, "y": self.y}


@dataclass
class Tag:
    label: str


class Opaque:
    pass


DOCUMENT = {"data": {"user": {"id": 7, "name": "Ada"}, "items": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]}}


def test_select_designated_path():
    assert select_designated_path(DOCUMENT, None) is DOCUMENT
    assert select_designated_path(DOCUMENT, "data.user") == {"id": 7, "name": "Ada"}
    assert select_designated_path(DOCUMENT, "data..user.") == {"id": 7, "name": "Ada"}


@pytest.mark.parametrize("path", ["missing", "data.nope", "data.items.0", "data.user.id.deeper"])
def test_select_designated_path_missing(path):
    with pytest.raises(KeyError):
        select_designated_path(DOCUMENT, path)


def test_deserialize_pydantic_model():
    assert deserialize(User, '{"id": 1, "name": "A"}') == User(id=1, name="A")


@pytest.mark.parametrize("body", ['{"id": "x"}', '{"id": 1}', "[]", "not json", ""])
def test_deserialize_mismatch_returns_none(body):
    assert deserialize(User, body) is None


def test_designated_path_equals_pre_extracted_subtree():
    body = json.dumps(DOCUMENT)
    subtree = json.dumps(DOCUMENT["data"]["user"])

    assert deserialize(User, body, "data.user") == deserialize(User, subtree)
    assert deserialize_list(User, body, "data.items") == deserialize_list(User, json.dumps(DOCUMENT["data"]["items"]))


def test_deserialize_list_keeps_order():
    users = deserialize_list(User, '[{"id": 2, "name": "B"}, {"id": 1, "name": "A"}]')

    assert users == [User(id=2, name="B"), User(id=1, name="A")]


@pytest.mark.parametrize(
    "body",
    [
        '[{"id": 1, "name": "A"}, {"id": "x", "name": "B"}]',
        '{"id": 1, "name": "A"}',
        "null",
    ],
)
def test_deserialize_list_is_all_or_nothing(body):
    assert deserialize_list(User, body) is None


def test_decodable_protocol_is_used():
    assert deserialize(Point, '{"p": {"x": 1, "y": 2}}', "p") == Point(1, 2)
    assert deserialize(Point, '{"x": "1", "y": 2}') is None


def test_decodable_list_decodes_each_element():
    assert deserialize_list(Point, '[{"x": 1, "y": 2}, {"x": 3, "y": 4}]') == [Point(1, 2), Point(3, 4)]
    assert deserialize_list(Point, '[{"x": 1, "y": 2}, {"x": 3}]') is None


def test_registered_decoder_takes_precedence():
    calls = []

    def decode_user(json_string, designated_path):
        calls.append(designated_path)
        return User(id=0, name="registered")

    register_decoder(User, decode_user)
    try:
        assert deserialize(User, '{"id": 1, "name": "A"}', "ignored") == User(id=0, name="registered")
    finally:
        unregister_decoder(User)

    assert calls == ["ignored"]
    assert deserialize(User, '{"id": 1, "name": "A"}') == User(id=1, name="A")


def test_registered_decoder_errors_count_as_mismatch():
    def broken(json_string, designated_path):
        raise ValueError("boom")

    register_decoder(Tag, broken)
    try:
        assert deserialize(Tag, '{"label": "x"}') is None
    finally:
        unregister_decoder(Tag)


def test_dataclass_via_type_adapter():
    assert deserialize(Tag, '{"label": "x"}') == Tag(label="x")


def test_to_json_object():
    assert to_json_object(User(id=1, name="A")) == {"id": 1, "name": "A"}
    assert to_json_object(Tag(label="x")) == {"label": "x"}
    assert to_json_object(Point(1, 2)) == {"x": 1, "y": 2}
    assert to_json_object(Opaque()) is None


class BrokenPoint(Point):
    def to_json(self):
        raise KeyError("x")


def test_to_json_object_swallows_custom_serializer_errors():
    assert to_json_object(BrokenPoint(1, 2)) is None


def test_deeply_nested_json_is_a_mismatch():
    body = "[" * 100_000 + "]" * 100_000

    assert deserialize(User, body) is None
    assert deserialize_list(User, body) is None
    assert deserialize(Point, body) is None
