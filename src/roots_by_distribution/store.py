"""
Sorted sample store with an incremental bracket counter.

Samples are kept sorted by domain value x. A bracket is detected purely
from neighbouring samples in that order:

- a sample with sign 0 is a point bracket (x, x);
- two neighbours with nonzero opposite signs form an interval bracket.

Inserting x between neighbours a < x < b replaces the adjacency (a, b) by
(a, x) and (x, b). Only those three pairs change, so the running count
is corrected locally instead of rescanning the store:

    k -= [s_a != 0 and s_a == -s_b]          (lost interval (a, b))
    k += [s == 0]                            (x is a root)
    k += [s != 0 and s == -s_a]              (new interval (a, x))
    k += [s != 0 and s == -s_b]              (new interval (x, b))

Zeros at a or b were counted on their own and are not affected.
"""

from bisect import bisect_left
from typing import Iterator, List, Optional, Tuple

from .evaluation import Sample


def _opposite(s: int, t: int) -> bool:
    """True if s and t are nonzero with opposite signs."""
    return s != 0 and s == -t


class SampleStore:
    """
    Ordered, unique-keyed collection of samples x -> sign.

    Lookups are binary searches over a sorted list of keys, O(log size).
    Insertion shifts the list tail, so it is O(size) in the worst case;
    the constant is small for the sample counts a search reaches.

    The attribute `count` always equals the number of brackets that
    `extract_brackets(store)` would produce.
    """

    def __init__(self):
        self._keys: List = []
        self._signs: List[int] = []
        self.count = 0
        self.n_discarded = 0

    # -----------------
    # Container protocol
    # -----------------

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Sample]:
        for x, s in zip(self._keys, self._signs):
            yield Sample(x, s)

    def __contains__(self, x) -> bool:
        i = bisect_left(self._keys, x)
        return i < len(self._keys) and self._keys[i] == x

    def __repr__(self) -> str:
        return f"SampleStore(size={len(self)}, count={self.count})"

    @property
    def keys(self) -> List:
        """Sorted domain values (a copy)."""
        return list(self._keys)

    @property
    def signs(self) -> List[int]:
        """Signs in key order (a copy)."""
        return list(self._signs)

    # -----------------
    # Lookup
    # -----------------

    def neighbors(self, x) -> Tuple[Optional[Sample], Optional[Sample]]:
        """
        Return the predecessor (largest key < x) and successor (smallest
        key >= x) of x. Either is None at the ends of the store.
        """
        return self._neighbors_at(bisect_left(self._keys, x))

    def _neighbors_at(self, i: int) -> Tuple[Optional[Sample], Optional[Sample]]:
        pred = Sample(self._keys[i - 1], self._signs[i - 1]) if i > 0 else None
        succ = (Sample(self._keys[i], self._signs[i])
                if i < len(self._keys) else None)
        return pred, succ

    # -----------------
    # Mutation
    # -----------------

    def seed(self, first: Sample, last: Sample) -> None:
        """
        Store the two endpoint samples and initialise the count.

        Raises
        ------
        RuntimeError
            If the store already holds samples.
        """
        if self._keys:
            raise RuntimeError(f"{self!r} is already seeded")

        self._keys.append(first.x)
        self._signs.append(first.s)
        if last.x == first.x:
            self.n_discarded += 1
            self.count = int(first.s == 0)
            return

        i = bisect_left(self._keys, last.x)
        self._keys.insert(i, last.x)
        self._signs.insert(i, last.s)
        self.count = (int(first.s == 0) + int(last.s == 0)
                      + int(_opposite(first.s, last.s)))

    def insert(self, x, s: int) -> bool:
        """
        Insert the sample (x, s) and update the running bracket count.

        A sample whose x is already stored is discarded.

        Returns
        -------
        bool
            True if the sample was stored, False if it was discarded.
        """
        i = bisect_left(self._keys, x)
        pred, succ = self._neighbors_at(i)
        if succ is not None and succ.x == x:
            self.n_discarded += 1
            return False

        # Outside the current range there is no lost adjacency on that side.
        slast = pred.s if pred is not None else 0
        sfirst = succ.s if succ is not None else 0

        self._keys.insert(i, x)
        self._signs.insert(i, s)

        if _opposite(slast, sfirst):
            self.count -= 1
        self.count += (int(s == 0) + int(_opposite(s, slast))
                       + int(_opposite(s, sfirst)))
        return True
