"""
Evaluation of f at transformed sequence points.

A sequence value z in [0, 1] is mapped to the domain by the transform and
only the sign of f there is kept:

    x = transform(z)
    s = sign(f(x))   in {-1, 0, 1}
"""

from typing import Any, Callable, NamedTuple


class Sample(NamedTuple):
    """A sampled domain point and the sign of f there."""
    x: Any
    s: int


def sign(value) -> int:
    """
    Return the sign of a real value as an int in {-1, 0, 1}.

    Works for Python floats, numpy scalars and mpmath numbers.

    Raises
    ------
    ValueError
        If value is NaN (it has no sign).

    Examples
    --------
    >>> sign(-2.5), sign(0.0), sign(3)
    (-1, 0, 1)
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    if value == 0:
        return 0
    raise ValueError(f"Cannot take the sign of {value!r}; f returned NaN")


def make_evaluator(f: Callable, transform: Callable) -> Callable[[float], Sample]:
    """
    Compose transform and f into a sampler z -> Sample(x, sign(f(x))).

    Exceptions raised by f or transform propagate unchanged.
    """
    def evaluate(z: float) -> Sample:
        x = transform(z)
        return Sample(x, sign(f(x)))

    return evaluate
