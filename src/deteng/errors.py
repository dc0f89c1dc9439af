"""
Errors raised by the shape checks in front of the determinant.

Both carry the offending ``size`` so callers can react without parsing
the message.
"""


def format_size(size):
    """Render a size tuple as ``[2, 3]`` for error messages."""
    return "[" + ", ".join(str(int(s)) for s in size) + "]"


class ShapeError(ValueError):
    """Input is not square: a vector of length != 1 or an m x n matrix, m != n."""

    def __init__(self, size, message="Matrix must be square"):
        self.size = tuple(int(s) for s in size)
        super().__init__(f"{message} (size: {format_size(self.size)})")


class DimensionError(ValueError):
    """Input has three or more dimensions."""

    def __init__(self, size, message="Matrix must be two dimensional"):
        self.size = tuple(int(s) for s in size)
        super().__init__(f"{message} (size: {format_size(self.size)})")
