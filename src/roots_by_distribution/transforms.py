"""
Transforms from the unit interval onto the domain of f.

The transform decides where the Sobol points land, i.e. the distribution
the domain is sampled from. It must be defined at z = 0 and z = 1.
"""

import math
from typing import Callable


def identity_transform(z: float) -> float:
    """Sample [0, 1] uniformly (the default transform)."""
    return float(z)


def affine_transform(lo: float, hi: float) -> Callable[[float], float]:
    """
    Return z -> lo + (hi - lo) * z, sampling [lo, hi] uniformly.

    The endpoints are mapped exactly: transform(0) == lo, transform(1) == hi.

    Examples
    --------
    >>> t = affine_transform(0.0, 2.0)
    >>> t(0.0), t(0.25), t(1.0)
    (0.0, 0.5, 2.0)
    """
    lo = float(lo)
    hi = float(hi)
    width = hi - lo

    def transform(z: float) -> float:
        if z == 1:
            return hi
        return lo + width * float(z)

    return transform


def log_transform(lo: float, hi: float) -> Callable[[float], float]:
    """
    Return z -> lo * (hi / lo)**z, sampling [lo, hi] log-uniformly.

    Useful when roots are spread over several orders of magnitude.

    Raises
    ------
    ValueError
        If lo is not positive or hi is not larger than lo.
    """
    if lo <= 0:
        raise ValueError(f"log_transform needs lo > 0, got lo={lo}")
    if hi <= lo:
        raise ValueError(f"log_transform needs hi > lo, got lo={lo}, hi={hi}")
    lo = float(lo)
    hi = float(hi)
    log_lo = math.log(lo)
    log_span = math.log(hi) - log_lo

    def transform(z: float) -> float:
        if z == 0:
            return lo
        if z == 1:
            return hi
        return math.exp(log_lo + log_span * float(z))

    return transform
