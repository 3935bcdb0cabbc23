"""
Benchmark: ezutil helpers.

    1. Levenshtein — rolling buffers vs a full DP matrix
    2. Levenshtein scaling with input length
    3. MdSlice access throughput, checked vs unchecked
"""

import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ezutil.levenshtein import levenshtein
from ezutil.mdslice import MdSlice


STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
]


def full_matrix(s, t):
    m, n = len(s), len(t)
    d = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        d[i][0] = i
    for j in range(n + 1):
        d[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1,
                          d[i - 1][j - 1] + (s[i - 1] != t[j - 1]))
    return d[m][n]


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_reference():
    print("=" * 70)
    print("  §1  ROLLING BUFFERS vs FULL MATRIX")
    print("=" * 70)
    print()

    for s1, s2 in STRING_PAIRS:
        t0 = time.perf_counter()
        got = levenshtein(s1, s2)
        dt_roll = time.perf_counter() - t0

        t0 = time.perf_counter()
        expected = full_matrix(s1, s2)
        dt_full = time.perf_counter() - t0

        match = "✓" if got == expected else "✗"
        print(f"  {match} d(\"{s1[:20]}\", \"{s2[:20]}\") = {got:>3}  "
              f"rolling {dt_roll*1000:.2f}ms  full {dt_full*1000:.2f}ms")
    print()


def benchmark_scaling():
    print("=" * 70)
    print("  §2  SCALING")
    print("=" * 70)
    print()

    for n in [10, 100, 500, 1000]:
        a = "ab" * (n // 2)
        b = "ba" * (n // 2)

        t0 = time.perf_counter()
        d = levenshtein(a, b)
        dt = time.perf_counter() - t0

        print(f"  Length {n:>5}: d={d:>5}  scratch={2 * (n + 1):>5} cells  "
              f"time={dt*1000:>9.2f}ms")
    print()


def benchmark_mdslice():
    print("=" * 70)
    print("  §3  MDSLICE ACCESS")
    print("=" * 70)
    print()

    lengths = (16, 16, 16)
    buf = [0] * (16 ** 3)
    coords = [(x, y, z) for z in range(16) for y in range(16) for x in range(16)]

    for checked in (True, False):
        view = MdSlice(buf, 0, lengths, checked=checked)
        t0 = time.perf_counter()
        for pos in coords:
            view.set(pos, view.get(pos) + 1)
        dt = time.perf_counter() - t0
        label = "checked" if checked else "unchecked"
        print(f"  {label:>9}: {len(coords)} read+write  "
              f"{dt*1e9/len(coords):>8.0f}ns/element")
    print()


def main():
    print()
    benchmark_reference()
    benchmark_scaling()
    benchmark_mdslice()


if __name__ == "__main__":
    main()
