"""
Global configuration and numerical defaults for bracket search.

The search draws points z from a one-dimensional Sobol sequence, maps them
through a transform onto the domain of f and tracks sign changes between
neighbouring samples until enough brackets have been found.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


# =============================================================================
# Sequence Source
# =============================================================================

DEFAULT_SCRAMBLE = False
"""Use the plain (unscrambled) Sobol sequence by default."""

DEFAULT_SEED = None
"""Seed for the scrambled Sobol sequence (ignored when unscrambled)."""


# =============================================================================
# Root Refinement
# =============================================================================

REFINE_METHODS: Tuple[str, ...] = ("brentq", "mpmath")
"""Supported bracketing refiners."""

DEFAULT_METHOD = "brentq"
"""Default refiner: scipy.optimize.brentq in double precision."""

DEFAULT_XTOL = 2e-12
"""Absolute tolerance passed to brentq."""

DEFAULT_RTOL = 8.881784197001252e-16
"""Relative tolerance passed to brentq (4 * machine epsilon)."""

DEFAULT_MAXITER = 100
"""Maximum refinement iterations."""

MPMATH_PRECISION = 50
"""Number of decimal digits for mpmath extended-precision refinement."""


# =============================================================================
# Search Configuration
# =============================================================================

@dataclass
class SearchConfig:
    """Configuration for a bracket search and the subsequent refinement."""
    scramble: bool = DEFAULT_SCRAMBLE
    seed: Optional[int] = DEFAULT_SEED
    method: str = DEFAULT_METHOD
    xtol: float = DEFAULT_XTOL
    rtol: float = DEFAULT_RTOL
    maxiter: int = DEFAULT_MAXITER
    dps: int = MPMATH_PRECISION
    verbose: bool = False

    def __post_init__(self):
        if self.method not in REFINE_METHODS:
            raise ValueError(
                f"Unknown refinement method {self.method!r}, "
                f"expected one of {REFINE_METHODS}"
            )
        if self.xtol <= 0 or self.rtol <= 0:
            raise ValueError(
                f"Tolerances must be positive, got xtol={self.xtol}, rtol={self.rtol}"
            )
        if self.maxiter < 1:
            raise ValueError(f"maxiter must be at least 1, got {self.maxiter}")
        if self.dps < 1:
            raise ValueError(f"dps must be at least 1, got {self.dps}")

    def make_sequence(self):
        """Return a fresh sequence source for one search."""
        from .sequence import SobolSequence
        return SobolSequence(scramble=self.scramble, seed=self.seed)
