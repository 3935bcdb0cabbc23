"""
Test suite for ezutil.mdslice — multidimensional buffer views.

    §1  Flat index layout (axis 0 fastest) for 1, 2 and 3 dimensions
    §2  Write-then-read through the view
    §3  Bounds policy (checked, unchecked, library default)
    §4  Construction contract
"""

import array
import itertools
import os
import sys

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ezutil.mdslice import MdSlice, OutOfBoundsError, strides_for_lengths
from ezutil.options import SAFETY


@pytest.fixture
def safety():
    """Restore the library safety option after a test flips it."""
    saved = SAFETY.value
    yield SAFETY
    SAFETY.value = saved


# ═══════════════════════════════════════════════════════════════════
#  §1  LAYOUT
# ═══════════════════════════════════════════════════════════════════

class TestLayout:

    def test_strides(self):
        assert strides_for_lengths((3, 7, 9)) == (1, 3, 21)
        assert strides_for_lengths((5,)) == (1,)
        assert strides_for_lengths(()) == ()

    def test_one_dimension(self):
        buf = list(range(10))
        view = MdSlice(buf, 0, (10,))
        assert view[0] == 0
        assert view[7] == 7
        assert view.get((9,)) == 9

    def test_two_dimensions(self):
        buf = list(range(12))
        view = MdSlice(buf, 0, (4, 3))
        # index = x + 4·y
        assert view[1, 2] == 9
        assert view[3, 0] == 3
        assert view[0, 1] == 4

    def test_three_dimensions_corners(self):
        buf = list(range(3 * 7 * 9))
        view = MdSlice(buf, 0, (3, 7, 9))
        assert len(buf) == 189
        assert view.get((0, 0, 0)) == buf[0]
        assert view.get((2, 6, 8)) == buf[-1]

    def test_matches_manual_row_major(self):
        lengths = (3, 7, 9)
        view = MdSlice(list(range(189)), 0, lengths)
        for x, y, z in itertools.product(*map(range, lengths)):
            assert view.index_of((x, y, z)) == x + 3 * y + 21 * z

    def test_index_uses_strides(self):
        view = MdSlice(list(range(200)), 5, (3, 7, 9))
        for pos in [(0, 0, 0), (1, 2, 3), (2, 6, 8)]:
            expected = 5 + sum(p * st for p, st in zip(pos, view.strides))
            assert view.index_of(pos) == expected

    def test_stride_cache_bounded(self):
        assert strides_for_lengths.cache_info().maxsize is not None

    def test_offset(self):
        buf = list(range(100))
        view = MdSlice(buf, 40, (2, 5))
        assert view[0, 0] == 40
        assert view[1, 4] == 49

    def test_properties(self):
        view = MdSlice([0] * 24, 0, (2, 3, 4))
        assert view.ndim == 3
        assert view.capacity == 24
        assert len(view) == 24


# ═══════════════════════════════════════════════════════════════════
#  §2  WRITE-THEN-READ
# ═══════════════════════════════════════════════════════════════════

class TestReadWrite:

    def test_every_coordinate(self):
        lengths = (3, 4, 2)
        view = MdSlice([None] * 24, 0, lengths)
        for pos in itertools.product(*map(range, lengths)):
            view.set(pos, pos)
        for pos in itertools.product(*map(range, lengths)):
            assert view.get(pos) == pos

    def test_list_coordinates(self):
        buf = list(range(12))
        view = MdSlice(buf, 0, (4, 3))
        assert view[[1, 2]] == view[1, 2] == 9
        view[[3, 0]] = "x"
        assert buf[3] == "x"

    def test_writes_reach_the_buffer(self):
        buf = [0] * 12
        view = MdSlice(buf, 0, (4, 3))
        view[1, 2] = 99
        assert buf[9] == 99

    def test_set_returns_none(self):
        view = MdSlice([0] * 4, 0, (2, 2))
        assert view.set((1, 1), 5) is None

    def test_shared_buffer_visible_across_views(self):
        buf = [0] * 16
        a = MdSlice(buf, 0, (4, 4))
        b = MdSlice(buf, 0, (16,))
        a[2, 3] = "x"
        assert b[14] == "x"

    def test_typed_array_buffer(self):
        buf = array.array("d", [0.0] * 6)
        view = MdSlice(buf, 0, (2, 3))
        view[1, 2] = 2.5
        assert buf[5] == 2.5

    def test_writes_stay_inside_window(self):
        buf = [0] * 10
        view = MdSlice(buf, 3, (2, 2))
        for pos in itertools.product(range(2), range(2)):
            view[pos] = 1
        assert buf == [0, 0, 0, 1, 1, 1, 1, 0, 0, 0]


# ═══════════════════════════════════════════════════════════════════
#  §3  BOUNDS POLICY
# ═══════════════════════════════════════════════════════════════════

class TestBounds:

    @pytest.mark.parametrize("pos", [(3, 0), (0, 7), (-1, 0), (0, -1), (10, 10)])
    def test_checked_rejects(self, pos):
        view = MdSlice(list(range(21)), 0, (3, 7), checked=True)
        with pytest.raises(OutOfBoundsError):
            view.get(pos)
        with pytest.raises(OutOfBoundsError):
            view.set(pos, 0)

    def test_error_names_axis(self):
        view = MdSlice(list(range(21)), 0, (3, 7), checked=True)
        with pytest.raises(OutOfBoundsError) as exc_info:
            view.get((1, 7))
        assert exc_info.value.axis == 1
        assert exc_info.value.lengths == (3, 7)
        assert "axis 1" in str(exc_info.value)

    def test_out_of_bounds_is_index_error(self):
        assert issubclass(OutOfBoundsError, IndexError)

    def test_unchecked_skips_check(self):
        # (3, 0) on a 3×7 view aliases (0, 1) when nothing checks.
        buf = list(range(21))
        view = MdSlice(buf, 0, (3, 7), checked=False)
        assert view.get((3, 0)) == buf[3]

    def test_default_follows_safety(self, safety):
        view = MdSlice(list(range(21)), 0, (3, 7))
        safety.value = 1
        assert view.checked
        with pytest.raises(OutOfBoundsError):
            view.get((3, 0))
        safety.value = 0
        assert not view.checked
        assert view.get((3, 0)) == 3

    def test_explicit_flag_overrides_safety(self, safety):
        safety.value = 0
        view = MdSlice(list(range(21)), 0, (3, 7), checked=True)
        with pytest.raises(OutOfBoundsError):
            view.get((3, 0))

    def test_wrong_arity_always_rejected(self):
        view = MdSlice([0] * 21, 0, (3, 7), checked=False)
        with pytest.raises(ValueError):
            view.get((1,))
        with pytest.raises(ValueError):
            view.set((1, 2, 3), 0)


# ═══════════════════════════════════════════════════════════════════
#  §4  CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════

class TestConstruction:

    def test_ndim_enforced(self):
        with pytest.raises(ValueError):
            MdSlice([0] * 6, 0, (2, 3), ndim=3)
        assert MdSlice([0] * 6, 0, (2, 3), ndim=2).ndim == 2

    @pytest.mark.parametrize("lengths", [(0, 3), (2, -1), (2.0, 3), (True, 2)])
    def test_lengths_must_be_positive_ints(self, lengths):
        with pytest.raises(ValueError):
            MdSlice([0] * 6, 0, lengths)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            MdSlice([0] * 6, -1, (2, 3))

    def test_does_not_copy(self):
        buf = [0] * 6
        view = MdSlice(buf, 0, (2, 3))
        assert view.items is buf

    def test_lengths_fixed(self):
        view = MdSlice([0] * 6, 0, [2, 3])
        assert view.lengths == (2, 3)
        assert isinstance(view.lengths, tuple)
