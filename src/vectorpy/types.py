from __future__ import annotations

from typing import Any, Dict, Tuple, Union

# these empty comments are because of the autodocumentation

StrDict = Dict[str, Any]
""
Float2 = Tuple[float, float]
""
Float3 = Tuple[float, float, float]
""
Float4 = Tuple[float, float, float, float]
""
Scalar = Union[int, float]
"""
A real number accepted wherever a single-precision component is expected.
It is rounded to the nearest ``float32`` value before use.
"""
