import os

from vectorpy.logging import (ArityError, DecodeError, VectorValueError,
                              config_logging, set_up_simple_logging)
from vectorpy.vec2 import Vector2
from vectorpy.vec3 import Vector3, deg_to_rad
from vectorpy.vec4 import Vector4
from vectorpy.vector import Vector


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
