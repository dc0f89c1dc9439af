"""
Arithmetic table used by the determinant and LU routines.

The element type is never inspected inside the hot loops: callers pick an
``Operations`` table once and every multiply/subtract goes through it.
The default table defers to Python's own operators, which already handle
int, float, complex, Fraction, Decimal, numpy scalars and sympy
expressions.
"""

import operator
from fractions import Fraction
from typing import Callable, NamedTuple


class Operations(NamedTuple):
    """Element arithmetic.

    Fields
    ------
    add : callable(a, b)
        Reserved for callers building on the table; neither the closed
        forms nor the LU routine need it.
    subtract, multiply : callable(a, b)
        Binary operators.
    negate : callable(a)
        Unary minus.
    divide : callable(a, b)
        Only needed by the generic LU route.
    magnitude : callable(a)
        Pivot ranking key for partial pivoting. Must return something
        orderable; only needed by the generic LU route.
    """
    add: Callable
    subtract: Callable
    multiply: Callable
    negate: Callable
    divide: Callable = operator.truediv
    magnitude: Callable = abs


DEFAULT_OPERATIONS = Operations(
    add=operator.add,
    subtract=operator.sub,
    multiply=operator.mul,
    negate=operator.neg,
)


def _symbolic_magnitude(value):
    # Pivot on "is it nonzero" only; symbolic abs() is not orderable.
    return 0 if value == 0 else 1


# For sympy expressions and other types whose abs() cannot be compared.
SYMBOLIC_OPERATIONS = DEFAULT_OPERATIONS._replace(magnitude=_symbolic_magnitude)


def _fraction_divide(a, b):
    return Fraction(a) / b


# Integer input: quotients become Fractions so elimination stays exact.
EXACT_OPERATIONS = DEFAULT_OPERATIONS._replace(divide=_fraction_divide)
