"""
Bracket search over a low-discrepancy sample of the domain.

Points z from a Sobol sequence are mapped through the transform, the sign
of f is recorded in a SampleStore, and sampling stops as soon as the
store's running count reaches the requested number of brackets. The
brackets are then read off the sorted samples in one pass.

The endpoints transform(0) and transform(1) are always sampled first; the
Sobol sequence itself never produces z = 1.

Note: if the image of [0, 1] under the transform holds fewer than n
brackets, the search never returns. Pass a finite `sequence` to bound it.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .config import SearchConfig
from .evaluation import Sample, make_evaluator
from .store import SampleStore
from .transforms import identity_transform


Bracket = Tuple[Any, Any]
"""A (lo, hi) pair; lo == hi marks an exact zero of f."""


@dataclass
class BracketSearchResult:
    """
    Result of a bracket search.

    Attributes
    ----------
    brackets : list of (lo, hi)
        At most n disjoint brackets in increasing order of lo.
    n_evaluations : int
        Number of evaluations of f, endpoints included.
    n_samples : int
        Number of distinct samples stored when the search stopped.
    n_discarded : int
        Number of samples dropped because their x was already stored.
    """
    brackets: List[Bracket] = field(default_factory=list)
    n_evaluations: int = 0
    n_samples: int = 0
    n_discarded: int = 0


# =============================================================================
# Bracket extraction
# =============================================================================

def extract_brackets(samples: Iterable[Sample]) -> List[Bracket]:
    """
    Read the brackets off samples sorted by x.

    Walks consecutive pairs (x, s), (y, t):

    - s == 0 gives a point bracket (x, x), unless it was already emitted
      as the zero of the previous pair;
    - t == 0 gives a point bracket (y, y);
    - nonzero opposite s, t give an interval bracket (x, y).

    Parameters
    ----------
    samples : iterable of (x, s)
        Samples in strictly increasing x, e.g. a SampleStore.

    Returns
    -------
    list of (lo, hi)
        Disjoint brackets in increasing order of lo.
    """
    samples = list(samples)
    if len(samples) == 1:
        x, s = samples[0]
        return [(x, x)] if s == 0 else []

    brackets = []
    skip = False
    for (x, s), (y, t) in zip(samples, samples[1:]):
        if not skip and s == 0:
            brackets.append((x, x))
        skip = False
        if t == 0:
            brackets.append((y, y))
            skip = True
        if s != 0 and s == -t:
            brackets.append((x, y))
    return brackets


def count_brackets(samples: Iterable[Sample]) -> int:
    """Number of brackets extract_brackets would return, by full rescan."""
    return len(extract_brackets(samples))


# =============================================================================
# Search
# =============================================================================

def search_brackets(
    f: Callable,
    n: int,
    transform: Callable = identity_transform,
    *,
    config: Optional[SearchConfig] = None,
    sequence: Optional[Callable[[], Iterable[float]]] = None,
) -> BracketSearchResult:
    """
    Sample f until n brackets are detected and return the first n of them
    with statistics.

    Parameters
    ----------
    f : callable
        Continuous function on the image of [0, 1] under transform.
    n : int
        Number of brackets to find. n <= 0 returns an empty result
        without evaluating f.
    transform : callable
        Map from [0, 1] to the domain of f. Default is the identity.
    config : SearchConfig, optional
        Sequence and verbosity settings.
    sequence : callable, optional
        Zero-argument factory returning an iterable of values in [0, 1].
        Default: a fresh SobolSequence from `config`.

    Returns
    -------
    BracketSearchResult

    Raises
    ------
    RuntimeError
        If a finite `sequence` runs out before n brackets are found.
    """
    if config is None:
        config = SearchConfig()
    if n <= 0:
        return BracketSearchResult()

    evaluate = make_evaluator(f, transform)
    store = SampleStore()
    store.seed(evaluate(0.0), evaluate(1.0))
    n_evaluations = 2

    if config.verbose:
        print(f"Bracket search: n = {n}, endpoints give {store.count} brackets")

    source: Iterator[float] = iter(
        sequence() if sequence is not None else config.make_sequence()
    )

    while store.count < n:
        try:
            z = next(source)
        except StopIteration:
            raise RuntimeError(
                f"Sequence exhausted after {n_evaluations} evaluations with "
                f"{store.count} of {n} brackets found"
            ) from None
        x, s = evaluate(z)
        n_evaluations += 1
        before = store.count
        if store.insert(x, s) and config.verbose and store.count != before:
            print(f"  [{n_evaluations}] x = {x}: {store.count}/{n} brackets")

    # Seeding or a single insertion can add two brackets, so the store
    # may hold more than n; keep the first n in order of lo.
    brackets = extract_brackets(store)[:n]

    if config.verbose:
        print(f"Found {len(brackets)} brackets after {n_evaluations} evaluations "
              f"({store.n_discarded} duplicates discarded)")

    return BracketSearchResult(
        brackets=brackets,
        n_evaluations=n_evaluations,
        n_samples=len(store),
        n_discarded=store.n_discarded,
    )


def bracket_roots(
    f: Callable,
    n: int,
    transform: Callable = identity_transform,
    *,
    config: Optional[SearchConfig] = None,
    sequence: Optional[Callable[[], Iterable[float]]] = None,
) -> List[Bracket]:
    """
    Find n disjoint brackets of roots of f.

    Each bracket (lo, hi) either has lo == hi with f(lo) == 0, or lo < hi
    with f(lo) and f(hi) of opposite sign. See search_brackets for the
    parameters.

    Examples
    --------
    >>> bracket_roots(lambda x: x - 0.5, 1)
    [(0.0, 1.0)]
    """
    return search_brackets(
        f, n, transform, config=config, sequence=sequence
    ).brackets
