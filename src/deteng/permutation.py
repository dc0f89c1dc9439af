"""
Permutation parity by cycle decomposition.

A permutation of n indices with c disjoint cycles has sign (-1)^(n - c).
Since n - c is the sum of (length - 1) over all cycles, only even-length
cycles contribute an odd term, so the sign is also (-1)^(number of
even-length cycles). ``count_even_cycles`` computes that count in a
single pass: every index is visited exactly once.
"""

import numpy as np


def count_even_cycles(p):
    """
    Count the cycles of even length in the permutation ``p``.

    Parameters
    ----------
    p : sequence of int
        A permutation of ``0..n-1``: ``p[i]`` is where row ``i`` goes.

    Returns
    -------
    int
        Number of cycles whose length is even. Fixed points never count.
    """
    n = len(p)
    visited = np.zeros(n, dtype=bool)
    even = 0
    for start in range(n):
        if visited[start]:
            continue
        length = 0
        j = start
        while not visited[j]:
            visited[j] = True
            j = int(p[j])
            length += 1
        if length % 2 == 0:
            even += 1
    return even


def permutation_parity(p):
    """Return 0 for an even permutation, 1 for an odd one."""
    return count_even_cycles(p) % 2


def permutation_sign(p):
    """Return +1 or -1."""
    return -1 if permutation_parity(p) else 1
