"""
.. module:: serialization
    :synopsis: Converts vectors from and to ordered records of their named fields,
               msgpack, JSON and packed little-endian float32 bytes.

A vector is always written as its fields in declaration order, e.g.
``{"x": 1.0, "y": 2.0, "z": 3.0}`` for a :class:`Vector3`. Values are single
precision, so msgpack uses its float32 encoding and every round trip gives
back the exact same components, including NaN and Infinity.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Type, TypeVar

import msgpack
import numpy as np

from vectorpy.logging import LOGGER_ID, DecodeError, create_warning
from vectorpy.misc.precision import is_f32_exact, is_scalar
from vectorpy.types import StrDict

if TYPE_CHECKING:
    from vectorpy.vector import Vector

V = TypeVar("V", bound="Vector")

logger = logging.getLogger(f"{LOGGER_ID}.serialization")

_F32_LE = np.dtype("<f4")


def to_record(vector: Vector) -> StrDict:
    """
    Converts a vector to a dictionary of its named fields.

    Args:
        vector: The vector to convert.

    Returns:
        A dictionary whose keys are the field names in field order.
    """
    return {name: getattr(vector, name) for name in vector._fields}


def from_record(cls: Type[V], data: Any) -> V:
    """
    Creates a vector of the given type from a record.

    Args:
        cls: The vector type to create.
        data: Either a mapping containing every field name (other keys are
              ignored) or a sequence holding exactly one value per field,
              in field order.

    Raises:
        DecodeError: If fields are missing, values are not numbers or ``data``
                     has an unsupported shape.

    Returns:
        The decoded vector.
    """
    fields = cls._fields
    if isinstance(data, Mapping):
        missing = [name for name in fields if name not in data]
        if missing:
            raise DecodeError(f"{cls.__name__} record is missing field(s): {', '.join(missing)}.")
        extra = [key for key in data if key not in fields]
        if extra:
            logger.debug(f"Ignoring unknown {cls.__name__} field(s): {extra}.")
        values = [data[name] for name in fields]
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        if len(data) != len(fields):
            raise DecodeError(f"{cls.__name__} record needs {len(fields)} values, got {len(data)}.")
        values = list(data)
    else:
        raise DecodeError(f"Cannot decode {cls.__name__} from {type(data).__name__}.")

    for name, value in zip(fields, values):
        if not is_scalar(value):
            raise DecodeError(f"Field '{name}' of {cls.__name__} is not a number: {value!r}.")
        if not is_f32_exact(value):
            create_warning(
                f"Field '{name}' of {cls.__name__} is not representable in single precision "
                f"and was rounded: {value!r}."
            )
    return cls(*values)


def packb(vector: Vector, as_array: bool = False) -> bytes:
    """
    Serializes a vector to msgpack.

    Args:
        vector: The vector to serialize.
        as_array: Write the fields as an array in field order instead of a map keyed by field name.

    Returns:
        The msgpack payload.
    """
    data = list(vector.to_slice()) if as_array else to_record(vector)
    return msgpack.packb(data, use_bin_type=True, use_single_float=True)


def unpackb(cls: Type[V], data: bytes) -> V:
    """
    Deserializes a vector written by :func:`packb`, in either map or array form.

    Raises:
        DecodeError: If the payload is not valid msgpack or not a record of ``cls``.
    """
    try:
        record = msgpack.unpackb(data, raw=False)
    except (ValueError, msgpack.UnpackException) as e:
        raise DecodeError(f"Invalid msgpack payload for {cls.__name__}: {e}") from e
    return from_record(cls, record)


def to_json(vector: Vector, **kwargs: Any) -> str:
    """
    Serializes a vector to a JSON object. Keyword arguments are passed on to :func:`json.dumps`.
    Non-finite components are written as ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    return json.dumps(to_record(vector), **kwargs)


def from_json(cls: Type[V], text: str | bytes) -> V:
    try:
        record = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON for {cls.__name__}: {e}") from e
    return from_record(cls, record)


def to_bytes(vector: Vector) -> bytes:
    """
    Packs the vector into little-endian float32 values, 4 bytes per component.
    """
    return np.asarray(vector.to_slice(), dtype=_F32_LE).tobytes()


def from_bytes(cls: Type[V], data: bytes, offset: int = 0) -> V:
    """
    Unpacks a vector from little-endian float32 values.

    Args:
        cls: The vector type to create.
        data: The buffer to read from.
        offset: The position of the first component within ``data``.

    Raises:
        DecodeError: If fewer than ``4 * arity`` bytes are available after ``offset``.

    Returns:
        The unpacked vector.
    """
    size = _F32_LE.itemsize * len(cls._fields)
    if offset < 0 or len(data) - offset < size:
        raise DecodeError(f"Not enough bytes to unpack {cls.__name__}. Need {size}.")
    values = np.frombuffer(data, dtype=_F32_LE, count=len(cls._fields), offset=offset)
    return cls(*values.tolist())
