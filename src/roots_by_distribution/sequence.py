"""
Low-discrepancy sequence source on the unit interval.

Wraps scipy.stats.qmc.Sobol in one dimension and hands out one point per
call, so a search evaluates f exactly as often as it needs to.

The plain Sobol sequence starts at 0.0. The search seeds the endpoints
z = 0 and z = 1 itself, so the unscrambled source skips that leading point
and starts at 0.5, 0.75, 0.25, ...
"""

from typing import Iterator, Optional

from scipy.stats import qmc

from .config import DEFAULT_SCRAMBLE, DEFAULT_SEED


class SobolSequence:
    """
    Infinite, restartable Sobol sequence in [0, 1).

    Parameters
    ----------
    scramble : bool
        If True, use an Owen-scrambled sequence (seeded by `seed`).
    seed : int, optional
        Seed for the scrambling. Ignored when `scramble` is False.

    Examples
    --------
    >>> seq = SobolSequence()
    >>> [next(seq) for _ in range(4)]
    [0.5, 0.75, 0.25, 0.375]
    """

    def __init__(self, scramble: bool = DEFAULT_SCRAMBLE,
                 seed: Optional[int] = DEFAULT_SEED):
        self.scramble = scramble
        self.seed = seed
        self._engine = qmc.Sobol(d=1, scramble=scramble, seed=seed)
        self.reset()

    def reset(self) -> "SobolSequence":
        """Restart the sequence from its first point."""
        self._engine.reset()
        if not self.scramble:
            self._engine.fast_forward(1)
        return self

    @property
    def num_generated(self) -> int:
        """Number of points drawn from the underlying engine (skip included)."""
        return self._engine.num_generated

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return float(self._engine.random(1)[0, 0])
