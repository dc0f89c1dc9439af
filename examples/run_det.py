"""
Determinant report
==================

Runs the determinant on a handful of inputs and prints the strategy the
detector picked for each one, plus a float-vs-exact comparison on a
random integer matrix.

Usage:
  pip install det-engine
  python run_det.py
"""

import time
from fractions import Fraction

import numpy as np

import deteng

# ── Config ──
SEED = 42
SIZES = [3, 5, 8, 12]

cases = {
    "scalar": 7,
    "vector [7]": [7],
    "2x2": [[1, 2], [3, 4]],
    "3x3 int": [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]],
    "3x3 fraction": [[Fraction(1, 2), 1, 0], [1, Fraction(1, 3), 1], [0, 1, 2]],
    "4x4 float": np.eye(4) * 2.0,
    "2x3": [[1, 2, 3], [4, 5, 6]],
    "2x2x2": np.zeros((2, 2, 2)),
}

print(f"\n{'='*70}")
print(f"  Strategy report")
print(f"{'='*70}")
for name, value in cases.items():
    report = deteng.detect_matrix(value)
    try:
        result = deteng.det(value)
    except ValueError as e:
        result = f"{type(e).__name__}: {e}"
    print(f"  {name:<14} {report['strategy']:<15} -> {result}")

# ── Exact vs LAPACK ──
print(f"\n{'='*70}")
print(f"  Exact vs LAPACK on random integer matrices")
print(f"{'='*70}")
np.random.seed(SEED)
for n in SIZES:
    A = np.random.randint(-9, 10, size=(n, n))

    t0 = time.time()
    exact = deteng.det(A)
    t_exact = time.time() - t0

    t0 = time.time()
    approx = deteng.det(A, method="lapack")
    t_lapack = time.time() - t0

    rel = abs(approx - exact) / max(abs(exact), 1)
    print(f"  n={n:<3} exact={exact:<22} lapack={approx:.6e} "
          f"rel.err={rel:.1e} [{t_exact*1e3:.1f} ms / {t_lapack*1e3:.2f} ms]")
