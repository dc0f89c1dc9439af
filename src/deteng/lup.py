"""
deteng LUP: LU decomposition with partial pivoting.

Two routes:
  - generic: Doolittle elimination through an ``Operations`` table, so it
    works for ints (via Fractions), Fractions, Decimals and symbolic
    elements. Runs on a private copy of the input.
  - lapack: ``scipy.linalg.lu`` for float/complex arrays.

Both return ``LUP(L, U, p)`` where ``p`` is a permutation of ``0..n-1``
with ``A[p] == L @ U``.

Usage:
    from deteng.lup import lup
    L, U, p = lup([[2, 1, 1], [4, 3, 3], [8, 7, 9]])
"""

from typing import NamedTuple

import numpy as np
import scipy.linalg

from deteng.detector import as_matrix
from deteng.errors import ShapeError
from deteng.operations import DEFAULT_OPERATIONS

METHODS = ("auto", "generic", "lapack")


class LUP(NamedTuple):
    """Factors of ``A[p] == L @ U``. L has a unit diagonal."""
    L: np.ndarray
    U: np.ndarray
    p: np.ndarray


def lup(A, ops=None, method="auto"):
    """
    LU-decompose a square matrix with row pivoting.

    Parameters
    ----------
    A : array_like
        Square 2-D input. Not modified.
    ops : Operations, optional
        Element arithmetic for the generic route. Defaults to
        ``DEFAULT_OPERATIONS``.
    method : str
        ``auto`` (LAPACK for float/complex arrays without a custom ``ops``,
        generic otherwise), ``generic`` or ``lapack``.

    Returns
    -------
    LUP
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    if ops is not None and method == "lapack":
        raise ValueError("A custom operations table needs the generic route, not LAPACK")

    A = as_matrix(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ShapeError(A.shape)

    if method == "auto":
        method = "lapack" if ops is None and A.dtype.kind in "fc" else "generic"

    if method == "lapack":
        return _lup_lapack(A)
    return _lup_generic(A, ops or DEFAULT_OPERATIONS)


def _lup_lapack(A):
    if A.dtype.kind not in "fc":
        raise ValueError(f"LAPACK route needs float or complex elements, got {A.dtype}")
    n = A.shape[0]
    lu, piv = scipy.linalg.lu_factor(A)
    L = np.tril(lu, k=-1) + np.eye(n, dtype=lu.dtype)
    U = np.triu(lu)
    return LUP(L, U, pivots_to_permutation(piv))


def pivots_to_permutation(piv):
    """
    Convert LAPACK getrf pivots to a row permutation.

    getrf swaps row ``i`` with row ``piv[i]`` for i = 0..n-1 in order;
    replaying those swaps on ``0..n-1`` gives ``p`` with ``A[p] == L @ U``.
    """
    p = np.arange(len(piv), dtype=np.int64)
    for i, j in enumerate(piv):
        if i != j:
            p[[i, j]] = p[[j, i]]
    return p


def _lup_generic(A, ops):
    """Doolittle elimination with partial pivoting, in place on a copy."""
    n = A.shape[0]
    U = A.astype(object, copy=True)
    L = np.zeros((n, n), dtype=object)
    p = np.arange(n, dtype=np.int64)

    for k in range(n):
        # Pivot: largest magnitude at or below the diagonal
        pivot = k
        best = ops.magnitude(U[k, k])
        for i in range(k + 1, n):
            m = ops.magnitude(U[i, k])
            if m > best:
                pivot, best = i, m

        if pivot != k:
            U[[k, pivot]] = U[[pivot, k]]
            L[[k, pivot]] = L[[pivot, k]]
            p[[k, pivot]] = p[[pivot, k]]

        L[k, k] = 1
        if U[k, k] == 0:
            # Whole column is zero below the diagonal: singular, nothing to eliminate
            continue

        for i in range(k + 1, n):
            factor = ops.divide(U[i, k], U[k, k])
            L[i, k] = factor
            U[i, k] = 0
            for j in range(k + 1, n):
                U[i, j] = ops.subtract(U[i, j], ops.multiply(factor, U[k, j]))

    return LUP(L, U, p)
