from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple, Type, TypeVar

import numpy as np

from vectorpy import serialization
from vectorpy.logging import ArityError
from vectorpy.misc.precision import f32, is_scalar
from vectorpy.types import Scalar, StrDict

V = TypeVar("V", bound="Vector")


def _add(a: float, b: float) -> float:
    return a + b


def _sub(a: float, b: float) -> float:
    return a - b


def _mul(a: float, b: float) -> float:
    return a * b


class Vector:
    """
    Base class of the fixed-size single-precision vectors. Holds everything the
    :class:`Vector2`, :class:`Vector3` and :class:`Vector4` types have in common:
    construction, component access, component-wise arithmetic and serialization.

    Vectors are immutable. Every component is rounded to ``float32`` when the
    vector is created and after every elementary operation, NaN and Infinity
    propagate the way they do in IEEE-754 arithmetic.

    Subclasses only declare their field names in ``_fields`` (and ``__slots__``).
    """

    __slots__ = ()
    _fields: Tuple[str, ...] = ()

    # NumPy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __init__(self, *components: float):
        if len(components) != len(self._fields):
            raise ArityError(
                f"{type(self).__name__} takes {len(self._fields)} components, got {len(components)}."
            )
        for name, value in zip(self._fields, components):
            object.__setattr__(self, name, f32(value))

    @classmethod
    def _from_values(cls: Type[V], values: Iterable[float]) -> V:
        vec = object.__new__(cls)
        for name, value in zip(cls._fields, values):
            object.__setattr__(vec, name, f32(value))
        return vec

    @classmethod
    def zero(cls: Type[V]) -> V:
        """
        Returns:
            The vector with every component set to zero.
        """
        return cls(*([0.0] * len(cls._fields)))

    @classmethod
    def from_array(cls: Type[V], values: Iterable[float]) -> V:
        """
        Creates a vector from a sequence of components in field order.

        Args:
            values: A sequence (or 1-D NumPy array) with exactly as many
                    elements as the vector has components.

        Raises:
            ArityError: If the number of elements differs from the arity.

        Returns:
            The new vector.
        """
        values = tuple(values)
        if len(values) != len(cls._fields):
            raise ArityError(
                f"Cannot convert {len(values)} values to {cls.__name__}, "
                f"exactly {len(cls._fields)} are required."
            )
        return cls(*values)

    def to_slice(self) -> Tuple[float, ...]:
        """
        Returns:
            The components as a tuple, in field order.
        """
        return tuple(getattr(self, name) for name in self._fields)

    def to_numpy(self) -> np.ndarray:
        """
        Returns:
            The components as a ``float32`` NumPy array, in field order.
        """
        return np.array(self.to_slice(), dtype=np.float32)

    def to_dict(self) -> StrDict:
        return serialization.to_record(self)

    @classmethod
    def from_dict(cls: Type[V], data: Any) -> V:
        return serialization.from_record(cls, data)

    def to_msgpack(self, as_array: bool = False) -> bytes:
        return serialization.packb(self, as_array=as_array)

    @classmethod
    def from_msgpack(cls: Type[V], data: bytes) -> V:
        return serialization.unpackb(cls, data)

    def to_json(self, **kwargs: Any) -> str:
        return serialization.to_json(self, **kwargs)

    @classmethod
    def from_json(cls: Type[V], text: str | bytes) -> V:
        return serialization.from_json(cls, text)

    def to_bytes(self) -> bytes:
        return serialization.to_bytes(self)

    @classmethod
    def from_bytes(cls: Type[V], data: bytes, offset: int = 0) -> V:
        return serialization.from_bytes(cls, data, offset)

    def _combine(self, other: Any, op: Callable[[float, float], float]) -> Any:
        if isinstance(other, Vector):
            if type(other) is not type(self):
                return NotImplemented
            return self._from_values(op(a, b) for a, b in zip(self, other))
        if is_scalar(other):
            scalar = f32(other)
            return self._from_values(op(a, scalar) for a in self)
        return NotImplemented

    def __add__(self: V, other: V | Scalar) -> V:
        """
        Component-wise sum with a vector of the same type, or adds a scalar to every component.
        """
        return self._combine(other, _add)

    def __sub__(self: V, other: V | Scalar) -> V:
        """
        Component-wise difference with a vector of the same type, or subtracts a scalar from every component.
        """
        return self._combine(other, _sub)

    def __mul__(self: V, other: V | Scalar) -> V:
        """
        Component-wise (Hadamard) product with a vector of the same type, or scalar multiplication.
        This is not the dot product.
        """
        return self._combine(other, _mul)

    def __rmul__(self: V, other: Scalar) -> V:
        if not is_scalar(other):
            return NotImplemented
        return self._combine(other, _mul)

    def __neg__(self: V) -> V:
        return self._from_values(-a for a in self)

    def __getitem__(self, n: int | slice) -> float | Tuple[float, ...]:
        """
        Returns the n-th component of the vector, starting by zero.
        A slice returns a tuple of the selected components.
        """
        if isinstance(n, slice):
            return tuple(getattr(self, name) for name in self._fields[n])
        return getattr(self, self._fields[n])

    def __iter__(self) -> Iterator[float]:
        for name in self._fields:
            yield getattr(self, name)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if type(other) is not type(self):
            return False
        # element-wise so that NaN components never compare equal
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_slice()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({fields})"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete '{name}'.")

    def __reduce__(self):
        return (type(self), self.to_slice())

    def __copy__(self: V) -> V:
        return self

    def __deepcopy__(self: V, memo: dict) -> V:
        return self
