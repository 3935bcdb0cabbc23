"""
ezutil
======

Small, independent helper routines.

    levenshtein("book", "back")          → 2
    MdSlice(buf, 0, (3, 7, 9))[2, 6, 8]  → buf[188]
    cast(i32, cast(f32, 10.6))           → 10
    ez_print("x", 42)                    → writes "x, 42\\n" to stderr

Each helper is stateless and stands alone:
  • MdSlice      — row-major view over a caller-owned flat buffer
  • levenshtein  — edit distance with two rolling buffers from a scoped arena
  • cast         — checked int/float conversion between fixed-width types
  • ez_print     — printf-style debugging to stderr
"""

from ezutil.options import Option, SAFETY
from ezutil.mdslice import MdSlice, OutOfBoundsError, strides_for_lengths
from ezutil.levenshtein import (
    Arena,
    ArenaExhausted,
    levenshtein,
    normalized_levenshtein,
)
from ezutil.numeric import (
    NumType, UnsupportedCastError, cast,
    i8, i16, i32, i64, u8, u16, u32, u64, f32, f64,
)
from ezutil.debug import ez_print, assert_print

__version__ = "0.1.0"
__all__ = [
    "Option", "SAFETY",
    "MdSlice", "OutOfBoundsError", "strides_for_lengths",
    "Arena", "ArenaExhausted", "levenshtein", "normalized_levenshtein",
    "NumType", "UnsupportedCastError", "cast",
    "i8", "i16", "i32", "i64", "u8", "u16", "u32", "u64", "f32", "f64",
    "ez_print", "assert_print",
]
