from __future__ import annotations

import pytest

from vectorpy import Vector2, Vector3, Vector4


@pytest.fixture
def vec2_pair() -> tuple[Vector2, Vector2]:
    return Vector2(1.5, -2.0), Vector2(0.25, 7.0)


@pytest.fixture
def vec3_pair() -> tuple[Vector3, Vector3]:
    return Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 6.0)


@pytest.fixture
def vec4_pair() -> tuple[Vector4, Vector4]:
    return Vector4(1.0, 2.0, 3.0, 4.0), Vector4(0.5, -1.0, 8.0, -2.0)
