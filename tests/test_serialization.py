from __future__ import annotations

import json
import logging
import math

import msgpack
import pytest

from vectorpy import DecodeError, Vector2, Vector3, Vector4
from vectorpy import serialization

FINITE = [
    Vector2(1.5, -0.1),
    Vector3(0.1, 3.4e38, -1e-40),
    Vector4(1.0, 2.0, -0.0, 1e-20),
]


def test_record_field_order():
    record = Vector3(1, 2, 3).to_dict()
    assert record == {"x": 1.0, "y": 2.0, "z": 3.0}
    assert list(record) == ["x", "y", "z"]
    assert list(Vector4(1, 2, 3, 4).to_dict()) == ["x", "y", "z", "w"]


@pytest.mark.parametrize("vec", FINITE, ids=lambda v: type(v).__name__)
def test_roundtrips_are_exact(vec):
    cls = type(vec)
    assert cls.from_dict(vec.to_dict()).to_slice() == vec.to_slice()
    assert cls.from_msgpack(vec.to_msgpack()).to_slice() == vec.to_slice()
    assert cls.from_msgpack(vec.to_msgpack(as_array=True)).to_slice() == vec.to_slice()
    assert cls.from_json(vec.to_json()).to_slice() == vec.to_slice()
    assert cls.from_bytes(vec.to_bytes()).to_slice() == vec.to_slice()


def test_non_finite_values_survive():
    vec = Vector3(float("nan"), float("inf"), float("-inf"))
    for decoded in (
        Vector3.from_msgpack(vec.to_msgpack()),
        Vector3.from_json(vec.to_json()),
        Vector3.from_bytes(vec.to_bytes()),
    ):
        assert math.isnan(decoded.x)
        assert decoded.y == float("inf")
        assert decoded.z == float("-inf")


def test_msgpack_layout():
    payload = Vector2(1, 2).to_msgpack()
    assert msgpack.unpackb(payload, raw=False) == {"x": 1.0, "y": 2.0}
    # map header, then per field a 1-char key and a 5-byte float32
    assert len(payload) == 1 + 2 * (2 + 5)
    assert msgpack.unpackb(Vector2(1, 2).to_msgpack(as_array=True)) == [1.0, 2.0]


def test_json_layout():
    assert json.loads(Vector2(0.5, 2).to_json()) == {"x": 0.5, "y": 2.0}
    assert Vector2(0.5, 2).to_json(separators=(",", ":")) == '{"x":0.5,"y":2.0}'


def test_bytes_layout():
    assert Vector2(1, 2).to_bytes() == b"\x00\x00\x80\x3f\x00\x00\x00\x40"
    assert len(Vector4.zero().to_bytes()) == 16
    data = b"\xff" * 3 + Vector3(1, 2, 3).to_bytes()
    assert Vector3.from_bytes(data, offset=3) == Vector3(1, 2, 3)


def test_from_record_accepts_sequences():
    assert Vector3.from_dict([1, 2, 3]) == Vector3(1, 2, 3)
    assert Vector3.from_dict((1.0, 2.0, 3.0)) == Vector3(1, 2, 3)


def test_extra_fields_are_ignored(caplog):
    with caplog.at_level(logging.DEBUG, logger="vectorpy.serialization"):
        v = Vector2.from_dict({"x": 1, "y": 2, "z": 3})
    assert v == Vector2(1, 2)
    assert "Ignoring unknown Vector2 field(s)" in caplog.text


def test_inexact_values_are_rounded_with_warning():
    with pytest.warns(UserWarning, match="single precision"):
        v = Vector2.from_dict({"x": 0.1, "y": 2})
    assert v.x == Vector2(0.1, 0).x


@pytest.mark.parametrize(
    "data",
    [
        {"x": 1.0},
        {"x": 1.0, "y": "2"},
        {"x": True, "y": 1.0},
        [1.0],
        [1.0, 2.0, 3.0],
        "xy",
        None,
        42,
    ],
)
def test_invalid_records(data):
    with pytest.raises(DecodeError):
        serialization.from_record(Vector2, data)


def test_invalid_payloads():
    with pytest.raises(DecodeError):
        Vector3.from_msgpack(b"\x93\x01")
    with pytest.raises(DecodeError):
        Vector3.from_msgpack(Vector2(1, 2).to_msgpack())
    with pytest.raises(DecodeError):
        Vector3.from_json("{not json")
    with pytest.raises(DecodeError):
        Vector3.from_bytes(b"\x00" * 11)
    with pytest.raises(DecodeError):
        Vector3.from_bytes(Vector3(1, 2, 3).to_bytes(), offset=1)


def test_huge_integer_literal_decodes_to_infinity():
    text = '{"x": 1' + "0" * 400 + ', "y": -1' + "0" * 400 + "}"
    with pytest.warns(UserWarning, match="single precision"):
        v = Vector2.from_json(text)
    assert v.x == float("inf")
    assert v.y == float("-inf")


def test_bool_values_are_rejected():
    with pytest.raises(DecodeError):
        Vector2.from_json('{"x": true, "y": 1}')


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        Vector2.from_json("[]")
