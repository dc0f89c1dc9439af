"""
deteng - Determinant Engine
===========================

Determinant of a square matrix over any element type: ints and Fractions
stay exact, floats go through LAPACK, symbolic elements go through an
injected operations table.

Quick start:
    import deteng

    # How will this input be evaluated?
    report = deteng.detect_matrix(A)

    # Determinant (auto-routes closed form / exact / LAPACK / generic)
    d = deteng.det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]])   # 6

    # LU decomposition with the row permutation
    L, U, p = deteng.lup(A)

Author: det-engine contributors
License: MIT
"""

__version__ = "0.1.0"
__author__ = "det-engine contributors"

from deteng.errors import ShapeError, DimensionError, format_size
from deteng.operations import (
    Operations, DEFAULT_OPERATIONS, EXACT_OPERATIONS, SYMBOLIC_OPERATIONS,
)
from deteng.detector import detect_matrix, classify, as_matrix, Shape
from deteng.permutation import (
    count_even_cycles, permutation_parity, permutation_sign,
)
from deteng.lup import lup, LUP
from deteng.det import det

__all__ = [
    "det", "detect_matrix", "classify", "as_matrix", "Shape",
    "lup", "LUP",
    "Operations", "DEFAULT_OPERATIONS", "EXACT_OPERATIONS", "SYMBOLIC_OPERATIONS",
    "count_even_cycles", "permutation_parity", "permutation_sign",
    "ShapeError", "DimensionError", "format_size",
]
