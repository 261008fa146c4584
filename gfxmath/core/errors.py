"""
Exceptions raised by gfxmath.

Arithmetic itself follows IEEE-754: dividing by zero or normalizing a zero
vector yields inf/nan components instead of raising. The exceptions below
cover the few operations that can fail outright.
"""


class GfxMathError(Exception):
    """Base class for all gfxmath errors."""


class BoundsError(GfxMathError, IndexError):
    """A runtime component or element index is out of range."""


class SingularMatrixError(GfxMathError, ArithmeticError):
    """A matrix with a zero determinant was inverted."""


class DimensionMismatchError(GfxMathError, TypeError):
    """Two values of different fixed sizes were combined."""
