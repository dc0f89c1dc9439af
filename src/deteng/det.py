"""
deteng Det: determinant with shape dispatch.

Routes every input through the detector, then:
  - scalar            -> a deep copy of the input
  - 1-element vector  -> a copy of the element
  - 1 x 1, 2 x 2      -> closed form
  - n x n, n >= 3     -> LU decomposition, diagonal product, cycle-parity sign

Usage:
    import deteng
    deteng.det([[1, 2], [3, 4]])                        # -2
    deteng.det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]])    # 6
"""

import copy
from fractions import Fraction

from deteng.detector import SCALAR, VECTOR, classify, select_strategy, validate
from deteng.lup import METHODS, lup
from deteng.operations import (
    DEFAULT_OPERATIONS, EXACT_OPERATIONS, SYMBOLIC_OPERATIONS,
)
from deteng.permutation import count_even_cycles


def det(x, ops=None, method="auto", verbose=False):
    """
    Determinant of ``x``.

    Parameters
    ----------
    x : object
        Scalar, nested list/tuple, numpy array or scipy sparse matrix.
        Never modified.
    ops : Operations, optional
        Element arithmetic. Defaults to Python's operators; integer input
        is eliminated over Fractions so the result stays exact, symbolic
        input pivots on nonzero entries. Cannot be combined with
        ``method="lapack"``.
    method : str
        ``auto``, ``generic`` or ``lapack``. Only affects n >= 3.
    verbose : bool
        Print the size and the chosen strategy.

    Returns
    -------
    object
        The determinant, in the element type of ``x``.

    Raises
    ------
    ShapeError
        Non-square input of rank 1 or 2.
    DimensionError
        Input of rank 3 or more.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    if ops is not None and method == "lapack":
        raise ValueError("A custom operations table needs the generic route, not LAPACK")

    shape = validate(classify(x))

    if shape.kind == SCALAR:
        return copy.deepcopy(x)
    if shape.kind == VECTOR:
        return copy.deepcopy(shape.value[0])

    A = shape.value.copy()
    n = A.shape[0]
    if n == 0:
        return 1

    strategy, reason = select_strategy(A, custom_ops=ops is not None)
    if method == "lapack" and n > 2 and strategy != "lapack":
        strategy, reason = "lapack", "LAPACK LU requested"
        if A.dtype.kind not in "fc":
            A = A.astype(float)
    elif method == "generic" and strategy == "lapack":
        strategy, reason = "generic", "Generic LU requested"

    if verbose:
        print(f"  [deteng] {n:,} x {n:,}, strategy={strategy} ({reason})")

    if strategy in ("exact_integer", "exact_rational"):
        result = _det(A.astype(object), n, EXACT_OPERATIONS, "generic")
        if (strategy == "exact_integer" and isinstance(result, Fraction)
                and result.denominator == 1):
            return result.numerator
        return result

    if strategy == "symbolic":
        return _det(A, n, SYMBOLIC_OPERATIONS, "generic")

    return _det(A, n, ops or DEFAULT_OPERATIONS,
                "lapack" if strategy == "lapack" else "generic")


def _det(A, n, ops, method):
    """Determinant of a square n x n array, n >= 1."""
    if n == 1:
        return copy.deepcopy(A[0, 0])
    if n == 2:
        return ops.subtract(ops.multiply(A[0, 0], A[1, 1]),
                            ops.multiply(A[1, 0], A[0, 1]))

    # det(L) == 1, so det(A) is the product of U's diagonal times sign(p)
    _, U, p = lup(A, ops=ops, method=method)

    result = U[0, 0]
    for i in range(1, n):
        result = ops.multiply(result, U[i, i])

    if count_even_cycles(p) % 2 == 0:
        return result
    return ops.negate(result)
