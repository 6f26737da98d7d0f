"""
This example script walks through the vector types: arithmetic, the
spherical-coordinate helpers of ``Vector3`` and serialization.
"""

import logging

from vectorpy import (Vector2, Vector3, Vector4, deg_to_rad,
                      set_up_simple_logging)


def main():
    set_up_simple_logging(level=logging.DEBUG)

    a = Vector2(1, 2)
    b = Vector2(3, 4)
    print(f"{a} + {b} = {a + b}")
    print(f"{a} * {b} = {a * b} (component-wise)")
    print(f"2 * {a} = {2 * a}")

    v = Vector3.from_polar(2.0, deg_to_rad(60.0), deg_to_rad(30.0))
    print(f"from_polar(2, 60deg, 30deg) = {v}")
    print(f"magnitude={v.magnitude():.4f} theta={v.theta():.4f} phi={v.phi():.4f}")
    print(f"normalized: {v.normalize()}, projected: {v.xy()}")
    print(f"x cross y = {Vector3(1, 0, 0).cross(Vector3(0, 1, 0))}")

    h = Vector4(1, 2, 3, 1) * Vector4(2, 2, 2, 1)
    payload = h.to_msgpack()
    print(f"{h} as msgpack: {payload.hex()}")
    print(f"decoded: {Vector4.from_msgpack(payload)}")
    print(f"as JSON: {h.to_json()}")

    # extra keys are logged at debug level and ignored
    print(Vector2.from_dict({"x": 1.0, "y": 2.0, "z": 3.0}))


if __name__ == "__main__":
    main()
