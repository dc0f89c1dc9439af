"""
deteng Detector: shape classification ahead of the determinant.

Turns any input into one of four shapes (scalar, vector, matrix,
higher_rank), validates it, and picks the evaluation strategy:
  - n <= 2            -> closed form
  - float/complex     -> LAPACK LU (scipy.linalg.lu_factor)
  - ints, Fractions   -> exact LU over Fractions
  - symbolic elements -> generic LU, pivot on the first nonzero entry
  - anything else     -> generic LU through the operations table

Usage:
    import deteng
    report = deteng.detect_matrix([[1, 2], [3, 4]])
    print(report)
"""

import numbers
from typing import Any, NamedTuple, Tuple

import numpy as np
from scipy import sparse

from deteng.errors import DimensionError, ShapeError

SCALAR = "scalar"
VECTOR = "vector"
MATRIX = "matrix"
HIGHER_RANK = "higher_rank"


class Shape(NamedTuple):
    """Result of ``classify``.

    Fields
    ------
    kind : str
        One of ``scalar``, ``vector``, ``matrix``, ``higher_rank``.
    size : tuple of int
        Dimension lengths; ``()`` for scalars.
    value : object
        The input itself for scalars, otherwise a numpy array.
    """
    kind: str
    size: Tuple[int, ...]
    value: Any


def as_matrix(x):
    """
    Convert ``x`` to a numpy array without losing exactness.

    numpy arrays are returned as-is and scipy sparse matrices are
    densified. Nested lists/tuples become ``dtype=object`` arrays so that
    Python ints, Fractions and symbolic expressions keep their type.

    Raises
    ------
    ShapeError
        If the nested sequence is ragged.
    """
    if isinstance(x, np.ndarray):
        return x
    if sparse.issparse(x):
        return x.toarray()

    arr = np.empty(_nested_size(x), dtype=object)
    _fill(arr, x, ())
    return arr


def _nested_size(x):
    """Size of a nested list, checking that every level is rectangular."""
    size = []
    level = [x]
    while level and all(isinstance(item, (list, tuple)) for item in level):
        lengths = {len(item) for item in level}
        if len(lengths) != 1:
            raise ShapeError((len(level),), "Matrix rows must have equal length")
        size.append(lengths.pop())
        level = [child for item in level for child in item]
    if any(isinstance(item, (list, tuple)) for item in level):
        raise ShapeError(tuple(size), "Matrix rows must have equal length")
    return tuple(size)


def _fill(arr, x, index):
    if len(index) == arr.ndim:
        arr[index] = x
        return
    for i, child in enumerate(x):
        _fill(arr, child, index + (i,))


def classify(x):
    """
    Classify ``x`` by rank.

    Parameters
    ----------
    x : object
        Scalar, nested list/tuple, numpy array or scipy sparse matrix.

    Returns
    -------
    Shape
    """
    if not isinstance(x, (list, tuple, np.ndarray)) and not sparse.issparse(x):
        return Shape(SCALAR, (), x)

    arr = as_matrix(x)
    size = tuple(int(s) for s in arr.shape)
    if arr.ndim == 0:
        return Shape(SCALAR, (), arr)
    if arr.ndim == 1:
        return Shape(VECTOR, size, arr)
    if arr.ndim == 2:
        return Shape(MATRIX, size, arr)
    return Shape(HIGHER_RANK, size, arr)


def validate(shape):
    """
    Enforce the "square, at most two dimensional" contract.

    Raises
    ------
    ShapeError
        Vector of length != 1, or a non-square matrix.
    DimensionError
        Three or more dimensions.
    """
    if shape.kind == VECTOR and shape.size[0] != 1:
        raise ShapeError(shape.size)
    if shape.kind == MATRIX and shape.size[0] != shape.size[1]:
        raise ShapeError(shape.size)
    if shape.kind == HIGHER_RANK:
        raise DimensionError(shape.size)
    return shape


def _all_of(arr, types):
    return all(isinstance(v, types) for v in arr.flat)


def select_strategy(arr, custom_ops=False):
    """
    Pick the evaluation strategy for a square 2-D array.

    Returns
    -------
    (str, str)
        Strategy name and a human-readable reason.
    """
    n = arr.shape[0]
    if n <= 2:
        return "closed_form", f"{n} x {n}, closed form"
    if custom_ops:
        return "generic", "Custom operations table, generic LU"

    kind = arr.dtype.kind
    if kind in "fc":
        return "lapack", f"{arr.dtype} elements, LAPACK LU"
    if kind in "iub" or (kind == "O" and _all_of(arr, numbers.Integral)):
        return "exact_integer", "Integer elements, exact LU over Fractions"
    if kind == "O" and _all_of(arr, numbers.Rational):
        return "exact_rational", "Rational elements, exact LU over Fractions"
    if kind == "O" and not _all_of(arr, numbers.Number):
        return "symbolic", "Symbolic elements, generic LU with nonzero pivoting"
    return "generic", f"{arr.dtype} elements, generic LU"


def detect_matrix(x, custom_ops=False):
    """
    Analyze ``x`` and report how its determinant would be computed.

    Parameters
    ----------
    x : object
        Any determinant input.
    custom_ops : bool
        Whether the caller supplies its own operations table.

    Returns
    -------
    dict
        Report with kind, size, is_square, strategy and reason. Invalid
        shapes get ``strategy="error"`` and the error message as reason.
    """
    try:
        shape = classify(x)
    except ShapeError as e:
        return {"kind": "ragged", "size": e.size, "is_square": False,
                "strategy": "error", "reason": str(e)}

    report = {
        "kind": shape.kind,
        "size": shape.size,
        "is_square": (shape.kind == SCALAR
                      or (shape.kind == VECTOR and shape.size[0] == 1)
                      or (shape.kind == MATRIX
                          and shape.size[0] == shape.size[1])),
    }

    try:
        validate(shape)
    except ValueError as e:
        report["strategy"] = "error"
        report["reason"] = str(e)
        return report

    if shape.kind == SCALAR:
        report["strategy"] = "clone"
        report["reason"] = "Scalar, determinant is the value itself"
    elif shape.kind == VECTOR:
        report["strategy"] = "clone"
        report["reason"] = "Single-element vector"
    else:
        strategy, reason = select_strategy(shape.value, custom_ops)
        report["strategy"] = strategy
        report["reason"] = reason
    return report
