"""
ezutil.levenshtein — Edit distance with rolling buffers
=======================================================

The Levenshtein distance between two sequences is the minimum number
of single-element insertions, deletions and substitutions (each of
cost 1) needed to turn one into the other.

§1  THE RECURRENCE
──────────────────

    D[0][j] = j
    D[i][0] = i
    D[i][j] = min(
        D[i-1][j]   + 1,                     # delete s[i-1]
        D[i][j-1]   + 1,                     # insert t[j-1]
        D[i-1][j-1] + (s[i-1] != t[j-1]),    # substitute / match
    )

Row i only reads row i-1, so two rows of n+1 cells suffice.  After
each outer step the rows are swapped; the last row computed ends up
in ``previous`` and the answer is ``previous[n]``.

Every cell is a non-negative int that only grows by 0 or 1 from a
non-negative neighbour, so there is no underflow to guard against.

§2  MEMORY
──────────

The shorter input is placed on the inner axis, so scratch memory is
2·(min(|s|, |t|) + 1) cells.  Swapping the inputs is safe because the
distance is symmetric.

Both rows come from an ``Arena`` that is entered on call entry and
released on every exit path.  An arena may carry a cell ``limit``;
exceeding it raises ``ArenaExhausted`` before any work is done.  The
distance itself never fails on valid input.

§3  PROPERTIES
──────────────

    d(s, s) = 0
    d(s, "") = |s|,   d("", t) = |t|
    d(s, t) = d(t, s)
    d(a, c) ≤ d(a, b) + d(b, c)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  SCOPED SCRATCH ALLOCATOR
# ═══════════════════════════════════════════════════════════════════

class ArenaExhausted(MemoryError):
    """An arena allocation would exceed the arena's cell limit."""

    def __init__(self, requested: int, in_use: int, limit: int):
        self.requested = requested
        self.in_use = in_use
        self.limit = limit
        super().__init__(
            f"arena exhausted: requested {requested} cells with "
            f"{in_use}/{limit} in use"
        )


class Arena:
    """
    Scoped scratch allocator for integer buffers.

    Use as a context manager.  Every buffer handed out by ``alloc``
    inside a ``with`` block is emptied and dropped when that block
    exits, whether it exits normally or through an exception.  Blocks
    nest: buffers from an enclosing block survive an inner one.

        with Arena(limit=1024) as arena:
            row = arena.alloc(65)

    An arena is single-threaded; concurrent callers each need their
    own.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        self.in_use = 0
        self._buffers: list[list[int]] = []
        self._marks: list[tuple[int, int]] = []

    def alloc(self, size: int) -> list[int]:
        """Return a zeroed list of ``size`` ints owned by this arena."""
        if self.limit is not None and self.in_use + size > self.limit:
            logger.debug("arena refused %d cells (%d/%d in use)",
                         size, self.in_use, self.limit)
            raise ArenaExhausted(size, self.in_use, self.limit)
        buf = [0] * size
        self._buffers.append(buf)
        self.in_use += size
        return buf

    def release(self, mark: tuple[int, int] = (0, 0)) -> None:
        """Drop every buffer handed out after ``mark``."""
        count, in_use = mark
        for buf in self._buffers[count:]:
            buf.clear()
        del self._buffers[count:]
        self.in_use = in_use

    def __enter__(self) -> Arena:
        self._marks.append((len(self._buffers), self.in_use))
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release(self._marks.pop())


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE
# ═══════════════════════════════════════════════════════════════════

def _as_sequence(x: Iterable[Any]) -> Sequence[Any]:
    return x if isinstance(x, Sequence) else tuple(x)


def levenshtein(s: Iterable[Any], t: Iterable[Any], *,
                arena: Optional[Arena] = None) -> int:
    """
    Levenshtein distance between two sequences.

    Works on any finite ordered sequences whose elements compare with
    ``==``: strings, bytes, lists of tokens, tuples of records.

    Raises ``MemoryError`` (``ArenaExhausted`` for a limited arena) if
    the two scratch rows cannot be obtained; nothing is computed in
    that case.  The two rows are returned to a caller-supplied ``arena``
    when the call returns; buffers it handed out earlier are untouched.
    """
    s = _as_sequence(s)
    t = _as_sequence(t)
    if len(t) > len(s):
        s, t = t, s
    m, n = len(s), len(t)
    if n == 0:
        return m

    with (arena if arena is not None else Arena()) as scratch:
        previous = scratch.alloc(n + 1)
        current = scratch.alloc(n + 1)

        for j in range(n + 1):
            previous[j] = j

        for i in range(m):
            si = s[i]
            current[0] = i + 1
            for j in range(n):
                deletion = previous[j + 1] + 1
                insertion = current[j] + 1
                substitution = previous[j] + (0 if si == t[j] else 1)
                current[j + 1] = min(deletion, insertion, substitution)
            previous, current = current, previous

        return previous[n]


def normalized_levenshtein(s: Iterable[Any], t: Iterable[Any], *,
                           arena: Optional[Arena] = None) -> float:
    """
    Levenshtein distance scaled into [0, 1].

    0.0 = identical
    1.0 = nothing in common positionally (every element edited)

    Normalised by max(|s|, |t|); two empty inputs are at distance 0.
    """
    s = _as_sequence(s)
    t = _as_sequence(t)
    longest = max(len(s), len(t))
    if longest == 0:
        return 0.0
    return levenshtein(s, t, arena=arena) / longest
