from __future__ import annotations

import pytest

from vectorpy import ArityError, Vector3, Vector4


def test_construct():
    v = Vector4(1, 2, 3, 4)
    assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)
    assert Vector4.zero() == Vector4(0, 0, 0, 0)


def test_arithmetic(vec4_pair):
    a, b = vec4_pair
    assert a + b == Vector4(1.5, 1.0, 11.0, 2.0)
    assert a - b == Vector4(0.5, 3.0, -5.0, 6.0)
    assert a * b == Vector4(0.5, -2.0, 24.0, -8.0)
    assert a + 1 == Vector4(2, 3, 4, 5)
    assert a - 0.5 == Vector4(0.5, 1.5, 2.5, 3.5)
    assert a * 0.5 == 0.5 * a == Vector4(0.5, 1.0, 1.5, 2.0)


def test_properties(vec4_pair):
    a, b = vec4_pair
    assert (a + b) - b == a
    assert a + b == b + a
    assert a * b == b * a
    assert a - b == -(b - a)


def test_slice_roundtrip():
    arr = [1.0, -2.5, 0.125, 1024.0]
    assert list(Vector4.from_array(arr).to_slice()) == arr
    assert Vector4(1, 2, 3, 4)[3] == 4.0


def test_from_array_arity_mismatch():
    with pytest.raises(ArityError):
        Vector4.from_array([1.0, 2.0, 3.0])
    with pytest.raises(ArityError):
        Vector4.from_array([1.0, 2.0, 3.0, 4.0, 5.0])
    with pytest.raises(TypeError):
        Vector4(1.0, 2.0, 3.0)


def test_no_geometric_operations():
    v = Vector4(1, 2, 3, 4)
    assert not hasattr(v, "magnitude")
    assert not hasattr(v, "normalize")
    assert not hasattr(v, "cross")
    with pytest.raises(TypeError):
        v + Vector3(1, 2, 3)
