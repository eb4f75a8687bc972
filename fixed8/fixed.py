"""Signed fixed-point numbers with eight fractional bits in a 32-bit word."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
SCALE = 1 << FRACTIONAL_BITS

_INT32_MIN = -(1 << 31)
_INT32_SPAN = 1 << 32

Number = Union[int, float]


def _wrap32(value: int) -> int:
    """Reduce an integer to a signed 32-bit value, wrapping on overflow."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _single(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise OverflowError(f"{value!r} does not fit in single precision") from exc


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    floor = math.floor(value)
    fraction = value - floor
    if fraction > 0.5 or (fraction == 0.5 and value >= 0):
        return floor + 1
    return floor


class Fixed:
    """An immutable fixed-point number stored as a raw 32-bit integer.

    The stored value is ``raw / 256``. Integers are shifted into place,
    floats are taken at single precision and rounded half away from zero.
    Arithmetic wraps around like a 32-bit integer.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Union["Fixed", Number] = 0) -> None:
        if isinstance(value, Fixed):
            raw = value._raw
        elif isinstance(value, bool):
            raise TypeError("Fixed cannot be built from a bool")
        elif isinstance(value, int):
            raw = _wrap32(value << FRACTIONAL_BITS)
        elif isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                raise ValueError(f"cannot represent {value!r} as Fixed")
            scaled = _single(_single(value) * SCALE)
            raw = _wrap32(_round_half_away(scaled))
        else:
            raise TypeError(f"Fixed cannot be built from {type(value).__name__}")
        self._raw = raw

    @classmethod
    def from_raw(cls, raw: int) -> "Fixed":
        """Build a value directly from its raw bits."""
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError("raw bits must be an int")
        result = cls.__new__(cls)
        result._raw = _wrap32(raw)
        return result

    @property
    def raw(self) -> int:
        """The raw 32-bit representation."""
        return self._raw

    def to_float(self) -> float:
        """The value as a float, computed at single precision."""
        return _single(_single(float(self._raw)) / SCALE)

    def to_int(self) -> int:
        """The integer part, rounded towards negative infinity."""
        return self._raw >> FRACTIONAL_BITS

    def next_up(self) -> "Fixed":
        """The next representable value above this one."""
        return Fixed.from_raw(self._raw + 1)

    def next_down(self) -> "Fixed":
        """The next representable value below this one."""
        return Fixed.from_raw(self._raw - 1)

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return f"{self.to_float():g}"

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw < other._raw

    def __le__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw <= other._raw

    def __gt__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw > other._raw

    def __ge__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw >= other._raw

    def __hash__(self) -> int:
        return hash((Fixed, self._raw))

    @staticmethod
    def _coerce(other: object) -> "Fixed | None":
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Fixed(other)
        return None

    def __add__(self, other: Union["Fixed", Number]) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return Fixed.from_raw(self._raw + operand._raw)

    def __radd__(self, other: Number) -> "Fixed":
        return self.__add__(other)

    def __sub__(self, other: Union["Fixed", Number]) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return Fixed.from_raw(self._raw - operand._raw)

    def __rsub__(self, other: Number) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand - self

    def __mul__(self, other: Union["Fixed", Number]) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return Fixed.from_raw((self._raw * operand._raw) >> FRACTIONAL_BITS)

    def __rmul__(self, other: Number) -> "Fixed":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Fixed", Number]) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        if operand._raw == 0:
            raise ZeroDivisionError("Fixed division by zero")
        numerator = self._raw << FRACTIONAL_BITS
        quotient = abs(numerator) // abs(operand._raw)
        if (numerator < 0) != (operand._raw < 0):
            quotient = -quotient
        return Fixed.from_raw(quotient)

    def __rtruediv__(self, other: Number) -> "Fixed":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand / self

    def __neg__(self) -> "Fixed":
        return Fixed.from_raw(-self._raw)


def fixed_min(a: Fixed, b: Fixed) -> Fixed:
    """The smaller of two values; the second one when they are equal."""
    return a if a < b else b


def fixed_max(a: Fixed, b: Fixed) -> Fixed:
    """The larger of two values; the second one when they are equal."""
    return a if a > b else b