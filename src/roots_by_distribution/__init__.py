"""
roots_by_distribution: roots of a continuous function by low-discrepancy
sampling.

Points of a Sobol sequence in [0, 1] are mapped through a transform onto
the domain of f; sign changes between neighbouring samples give brackets,
which are then refined to roots.

Main entry points:
- `bracket_roots(f, n, transform)`: n disjoint brackets (lo, hi)
- `find_roots(f, n, transform)`: n roots, refined inside the brackets
"""

from . import config

from .config import SearchConfig

from .sequence import SobolSequence

from .evaluation import (
    Sample,
    sign,
    make_evaluator,
)

from .store import SampleStore

from .brackets import (
    BracketSearchResult,
    extract_brackets,
    count_brackets,
    search_brackets,
    bracket_roots,
)

from .refine import refine_root

from .roots import find_roots

from .transforms import (
    identity_transform,
    affine_transform,
    log_transform,
)

__version__ = "0.1.0"
__all__ = [
    "config",
    "SearchConfig",
    # Sequence source
    "SobolSequence",
    # Evaluation
    "Sample",
    "sign",
    "make_evaluator",
    # Sample store
    "SampleStore",
    # Brackets
    "BracketSearchResult",
    "extract_brackets",
    "count_brackets",
    "search_brackets",
    "bracket_roots",
    # Roots
    "refine_root",
    "find_roots",
    # Transforms
    "identity_transform",
    "affine_transform",
    "log_transform",
]
