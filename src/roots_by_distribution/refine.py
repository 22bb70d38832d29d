"""
Root refinement inside a sign-changing bracket.

Two backends:

- "brentq": scipy.optimize.brentq in double precision;
- "mpmath": mpmath.findroot with the bracketing Anderson-Bjorck solver,
  for f that accepts and returns mpmath numbers.

Both expect f(lo) and f(hi) of opposite sign, which every interval
bracket from bracket_roots guarantees.
"""

from typing import Callable

from mpmath import mp
from scipy.optimize import brentq

from .config import (
    DEFAULT_METHOD, DEFAULT_XTOL, DEFAULT_RTOL, DEFAULT_MAXITER,
    MPMATH_PRECISION, REFINE_METHODS,
)


def _refine_brentq(f: Callable, lo, hi, xtol: float, rtol: float,
                   maxiter: int) -> float:
    root, info = brentq(
        f, lo, hi, xtol=xtol, rtol=rtol, maxiter=maxiter,
        full_output=True, disp=False,
    )
    if not info.converged:
        raise RuntimeError(
            f"brentq did not converge in [{lo}, {hi}] after "
            f"{info.iterations} iterations: {info.flag}"
        )
    return root


def _refine_mpmath(f: Callable, lo, hi, dps: int, maxiter: int):
    with mp.workdps(dps):
        # Raises ValueError if no root is found within tolerance.
        return mp.findroot(f, (mp.mpf(lo), mp.mpf(hi)),
                           solver="anderson", maxsteps=maxiter)


def refine_root(
    f: Callable,
    lo,
    hi,
    method: str = DEFAULT_METHOD,
    xtol: float = DEFAULT_XTOL,
    rtol: float = DEFAULT_RTOL,
    maxiter: int = DEFAULT_MAXITER,
    dps: int = MPMATH_PRECISION,
):
    """
    Find a root of f in the bracket [lo, hi].

    Parameters
    ----------
    f : callable
        Continuous function with f(lo), f(hi) of opposite sign (or lo == hi).
    lo, hi : float or mpf
        Bracket endpoints, lo <= hi.
    method : str
        "brentq" or "mpmath".
    xtol, rtol : float
        Absolute and relative tolerances (brentq only).
    maxiter : int
        Maximum iterations.
    dps : int
        Decimal digits of working precision (mpmath only).

    Returns
    -------
    float or mpf
        The root; lo itself for a degenerate bracket.

    Raises
    ------
    ValueError
        If lo > hi, or method is unknown.
    RuntimeError
        If brentq fails to converge.
    """
    if method not in REFINE_METHODS:
        raise ValueError(
            f"Unknown refinement method {method!r}, expected one of {REFINE_METHODS}"
        )
    if lo > hi:
        raise ValueError(f"Invalid bracket: lo={lo} > hi={hi}")
    if lo == hi:
        return lo

    if method == "brentq":
        return _refine_brentq(f, lo, hi, xtol, rtol, maxiter)
    return _refine_mpmath(f, lo, hi, dps, maxiter)
