"""
ezutil.mdslice — Multidimensional view over a flat buffer
=========================================================

An ``MdSlice`` addresses a caller-owned contiguous buffer as an
N-dimensional array without copying it.

LAYOUT
──────

Axis 0 is the fastest-varying axis:

    stride[0] = 1
    stride[i] = stride[i-1] · lengths[i-1]

    index(pos) = offset + Σ pos[i] · stride[i]

So a 3×7×9 view over a 189-element buffer maps (0, 0, 0) to the first
element and (2, 6, 8) to the last:  2 + 6·3 + 8·21 = 188.

OWNERSHIP
─────────

The view holds a plain reference to ``items``.  It never frees, resizes
or copies the buffer; whoever owns the buffer must keep it alive, and
must not grow or shrink it, for as long as the view is in use.  Writes
go straight through to the buffer and are visible to every other
reference to it.  Nothing checks at construction that the buffer holds
``offset + capacity`` elements.

BOUNDS POLICY
─────────────

Coordinate checks follow ``ezutil.options.SAFETY`` unless the view is
built with an explicit ``checked=True`` / ``checked=False``.  A checked
view raises ``OutOfBoundsError`` deterministically; an unchecked view
computes the flat index as-is and leaves the result to the buffer.
"""

from __future__ import annotations

import functools
import itertools
import operator
from typing import Any, Generic, MutableSequence, Optional, Sequence, TypeVar

from ezutil.options import SAFETY

T = TypeVar("T")


class OutOfBoundsError(IndexError):
    """A coordinate fell outside its axis length."""

    def __init__(self, pos: tuple[int, ...], lengths: tuple[int, ...], axis: int):
        self.pos = pos
        self.lengths = lengths
        self.axis = axis
        super().__init__(
            f"index {pos[axis]} out of bounds for axis {axis} with length "
            f"{lengths[axis]} (pos={pos}, lengths={lengths})"
        )


@functools.lru_cache(maxsize=256)
def strides_for_lengths(lengths: tuple[int, ...]) -> tuple[int, ...]:
    """Per-axis strides with axis 0 contiguous."""
    if not lengths:
        return ()
    return tuple(itertools.accumulate(lengths[:-1], operator.mul, initial=1))


def prod(xs: Sequence[int]) -> int:
    return functools.reduce(operator.mul, xs, 1)


def _as_coords(pos: Any) -> Sequence[int]:
    # view[i] is shorthand for view[(i,)]; lists work like tuples.
    return pos if isinstance(pos, Sequence) else (pos,)


class MdSlice(Generic[T]):
    """
    Row-major view of ``items[offset : offset + prod(lengths)]``.

    Examples:
        buf = list(range(189))
        view = MdSlice(buf, 0, (3, 7, 9))
        view[2, 6, 8]            # 188
        view.set((0, 1, 0), -1)  # buf[3] = -1
    """
    __slots__ = ("items", "offset", "lengths", "strides", "capacity", "_checked")

    def __init__(
        self,
        items: MutableSequence[T],
        offset: int,
        lengths: Sequence[int],
        *,
        ndim: Optional[int] = None,
        checked: Optional[bool] = None,
    ):
        lengths = tuple(lengths)
        if ndim is not None and len(lengths) != ndim:
            raise ValueError(f"expected {ndim} lengths, got {len(lengths)}: {lengths}")
        for axis, n in enumerate(lengths):
            if type(n) is not int or n <= 0:
                raise ValueError(f"length of axis {axis} must be a positive int, got {n!r}")
        if type(offset) is not int or offset < 0:
            raise ValueError(f"offset must be a non-negative int, got {offset!r}")

        self.items = items
        self.offset = offset
        self.lengths = lengths
        self.strides = strides_for_lengths(lengths)
        self.capacity = prod(lengths)
        self._checked = checked

    @property
    def ndim(self) -> int:
        return len(self.lengths)

    @property
    def checked(self) -> bool:
        """Whether this view bounds-checks coordinates right now."""
        if self._checked is None:
            return bool(SAFETY)
        return self._checked

    def index_of(self, pos: Sequence[int]) -> int:
        """Flat index into ``items`` for coordinate ``pos``."""
        if len(pos) != len(self.lengths):
            raise ValueError(
                f"expected {len(self.lengths)} coordinates, got {len(pos)}: {tuple(pos)}"
            )
        checked = self.checked
        index = self.offset
        for axis, (p, n, stride) in enumerate(zip(pos, self.lengths, self.strides)):
            if checked and not 0 <= p < n:
                raise OutOfBoundsError(tuple(pos), self.lengths, axis)
            index += p * stride
        return index

    def get(self, pos: Sequence[int]) -> T:
        return self.items[self.index_of(pos)]

    def set(self, pos: Sequence[int], value: T) -> None:
        self.items[self.index_of(pos)] = value

    def __getitem__(self, pos: Any) -> T:
        return self.get(_as_coords(pos))

    def __setitem__(self, pos: Any, value: T) -> None:
        self.set(_as_coords(pos), value)

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        return (f"MdSlice(lengths={self.lengths}, offset={self.offset}, "
                f"checked={self.checked})")
