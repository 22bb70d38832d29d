"""
Roots of f from the brackets found by bracket_roots.

Point brackets are already exact zeros; interval brackets are refined
with refine_root.
"""

from typing import Callable, Iterable, List, Optional

from .brackets import bracket_roots
from .config import SearchConfig
from .refine import refine_root
from .transforms import identity_transform


def find_roots(
    f: Callable,
    n: int,
    transform: Callable = identity_transform,
    *,
    config: Optional[SearchConfig] = None,
    sequence: Optional[Callable[[], Iterable[float]]] = None,
) -> List:
    """
    Find n roots of the continuous function f on the image of [0, 1]
    under transform.

    Does not return if f has fewer than n brackets in that image.

    Parameters
    ----------
    f : callable
        Continuous function on the transformed domain.
    n : int
        Number of roots. n <= 0 returns [] without evaluating f.
    transform : callable
        Map from [0, 1] to the domain of f.
    config : SearchConfig, optional
        Sequence, refinement and verbosity settings.
    sequence : callable, optional
        Factory for the sequence source (see search_brackets).

    Returns
    -------
    list
        n roots in increasing order.

    Examples
    --------
    >>> find_roots(lambda x: x * (x - 1) * (x - 2), 3, lambda z: 2 * z)
    [0.0, 1.0, 2.0]
    """
    if config is None:
        config = SearchConfig()

    brackets = bracket_roots(f, n, transform, config=config, sequence=sequence)

    roots = []
    for i, (lo, hi) in enumerate(brackets):
        if lo == hi:
            root = lo
        else:
            root = refine_root(
                f, lo, hi, method=config.method,
                xtol=config.xtol, rtol=config.rtol,
                maxiter=config.maxiter, dps=config.dps,
            )
        if config.verbose:
            print(f"  [{i+1}/{len(brackets)}] [{lo}, {hi}] -> {root}")
        roots.append(root)
    return roots
