"""
Command-line interface: find roots of an importable function.

The function is named as "module:attribute", e.g. "math:cos" or
"mypackage.models:residual"; nested attributes are separated by dots.

Usage:
    python -m roots_by_distribution math:cos -n 3 --hi 10
    python -m roots_by_distribution math:log10 -n 1 --lo 0.1 --hi 100 --log
    python -m roots_by_distribution mpmath:cos -n 1 --lo 1 --hi 2 \\
        --method mpmath --verbose
"""

import argparse
import importlib
from typing import Callable, List, Optional

from mpmath import mp

from .brackets import bracket_roots
from .config import (
    DEFAULT_METHOD, DEFAULT_XTOL, DEFAULT_RTOL, DEFAULT_MAXITER,
    MPMATH_PRECISION, REFINE_METHODS, SearchConfig,
)
from .roots import find_roots
from .transforms import affine_transform, log_transform


def resolve_function(target: str) -> Callable:
    """
    Import the callable named by "module:attribute".

    Parameters
    ----------
    target : str
        Module path and attribute path separated by a colon, e.g.
        "numpy:cos" or "package.module:Class.method".

    Raises
    ------
    ValueError
        If target is not of the form "module:attribute", or the resolved
        object is not callable.
    ImportError
        If the module cannot be imported.
    AttributeError
        If the module has no such attribute.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(
            f"Function must be given as 'module:attribute', got {target!r}"
        )

    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not callable(obj):
        raise ValueError(f"{target!r} resolves to a non-callable {type(obj).__name__}")
    return obj


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roots_by_distribution",
        description="Find roots of f(x) by Sobol sampling of [lo, hi]",
    )
    parser.add_argument(
        "function", type=str,
        help="Function to solve, as 'module:attribute', e.g. 'math:cos'"
    )
    parser.add_argument(
        "-n", "--count", type=int, required=True,
        help="Number of roots (brackets) to find"
    )
    parser.add_argument(
        "--lo", type=float, default=0.0,
        help="Lower end of the sampled domain (default: 0)"
    )
    parser.add_argument(
        "--hi", type=float, default=1.0,
        help="Upper end of the sampled domain (default: 1)"
    )
    parser.add_argument(
        "--log", action="store_true",
        help="Sample [lo, hi] log-uniformly instead of uniformly"
    )
    parser.add_argument(
        "--brackets-only", action="store_true",
        help="Print brackets instead of refined roots"
    )
    parser.add_argument(
        "--method", type=str, default=DEFAULT_METHOD, choices=REFINE_METHODS,
        help=f"Root refinement method (default: {DEFAULT_METHOD})"
    )
    parser.add_argument(
        "--xtol", type=float, default=DEFAULT_XTOL,
        help=f"Absolute tolerance for brentq (default: {DEFAULT_XTOL})"
    )
    parser.add_argument(
        "--rtol", type=float, default=DEFAULT_RTOL,
        help=f"Relative tolerance for brentq (default: {DEFAULT_RTOL})"
    )
    parser.add_argument(
        "--maxiter", type=int, default=DEFAULT_MAXITER,
        help=f"Maximum refinement iterations (default: {DEFAULT_MAXITER})"
    )
    parser.add_argument(
        "--dps", type=int, default=MPMATH_PRECISION,
        help=f"Decimal digits for --method mpmath (default: {MPMATH_PRECISION})"
    )
    parser.add_argument(
        "--scramble", action="store_true",
        help="Use a scrambled Sobol sequence"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the scrambled sequence"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print progress"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    config = SearchConfig(
        scramble=args.scramble,
        seed=args.seed,
        method=args.method,
        xtol=args.xtol,
        rtol=args.rtol,
        maxiter=args.maxiter,
        dps=args.dps,
        verbose=args.verbose,
    )
    f = resolve_function(args.function)
    if args.log:
        transform = log_transform(args.lo, args.hi)
    else:
        transform = affine_transform(args.lo, args.hi)

    if args.method == "mpmath":
        fmt = lambda value: mp.nstr(value, args.dps)
    else:
        fmt = str

    if args.brackets_only:
        for lo, hi in bracket_roots(f, args.count, transform, config=config):
            print(f"{fmt(lo)} {fmt(hi)}")
    else:
        for root in find_roots(f, args.count, transform, config=config):
            print(fmt(root))
    return 0
