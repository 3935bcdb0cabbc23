"""
ezutil.numeric — Casting between fixed-width numeric types
==========================================================

    cast(i32, 10)           → 10
    cast(f32, 10)           → 10.0
    cast(i32, 10.6)         → 10      (truncates toward zero)
    cast(u8, 256)           → OverflowError
    cast(i32, "10")         → UnsupportedCastError

Only int → int, int → float, float → int and float → float are
defined.  Anything else (bool, str, None, a non-numeric target) is a
programming error and raises ``UnsupportedCastError`` immediately.
"""

from __future__ import annotations

import math
import struct
import sys
from dataclasses import dataclass
from typing import Literal, Optional, Union

Kind = Literal["int", "float"]
Number = Union[int, float]


class UnsupportedCastError(TypeError):
    """Source/target pairing outside int ↔ float."""


@dataclass(frozen=True, slots=True)
class NumType:
    """
    A fixed-width numeric type.

    ``bits`` is the storage width; ``signed`` only matters for ints.
    ``fmt`` is the ``struct`` code used to round floats to width.
    """
    name: str
    kind: Kind
    bits: int
    signed: bool = True
    fmt: Optional[str] = None

    @property
    def min(self) -> Number:
        if self.kind == "float":
            return -self.max
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> Number:
        if self.kind == "float":
            return _FLOAT_MAX[self.bits]
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def __repr__(self) -> str:
        return self.name


_FLOAT_MAX = {32: (2 - 2.0 ** -23) * 2.0 ** 127, 64: sys.float_info.max}

i8 = NumType("i8", "int", 8)
i16 = NumType("i16", "int", 16)
i32 = NumType("i32", "int", 32)
i64 = NumType("i64", "int", 64)
u8 = NumType("u8", "int", 8, signed=False)
u16 = NumType("u16", "int", 16, signed=False)
u32 = NumType("u32", "int", 32, signed=False)
u64 = NumType("u64", "int", 64, signed=False)
f32 = NumType("f32", "float", 32, fmt="<f")
f64 = NumType("f64", "float", 64, fmt="<d")

Target = Union[NumType, type]


def _kind_of_target(target: Target) -> Kind:
    if isinstance(target, NumType):
        return target.kind
    if target is int:
        return "int"
    if target is float:
        return "float"
    raise UnsupportedCastError(f"casting to {target!r} is unsupported")


def _kind_of_value(value: object) -> Kind:
    # bool is an int subclass in Python but not a number here.
    if type(value) is bool:
        raise UnsupportedCastError("casting from bool is unsupported")
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    raise UnsupportedCastError(f"casting from {type(value).__name__} is unsupported")


def cast(target: Target, value: Number) -> Number:
    """
    Convert ``value`` to ``target``.

    ``target`` is a ``NumType`` (``i32``, ``f32``, ...) or the builtin
    ``int``/``float`` for unbounded results.  Float → int truncates
    toward zero.  Finite results outside the target range raise
    ``OverflowError``; infinities and NaN pass through float targets.
    """
    dst = _kind_of_target(target)
    src = _kind_of_value(value)

    if dst == "int":
        result = value if src == "int" else math.trunc(value)
        if isinstance(target, NumType) and not target.min <= result <= target.max:
            raise OverflowError(f"{value!r} does not fit in {target.name}")
        return result

    result = float(value)
    if isinstance(target, NumType):
        if math.isfinite(result) and not target.min <= result <= target.max:
            raise OverflowError(f"{value!r} does not fit in {target.name}")
        result = struct.unpack(target.fmt, struct.pack(target.fmt, result))[0]
    return result
