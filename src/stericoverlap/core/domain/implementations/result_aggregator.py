"""Ordering and deduplication of match records."""

from typing import List, Sequence

from ...config import DEDUP_ADJACENT, DEDUP_FULL, DEDUP_MODES
from ..models.match_record import MatchRecord


class ResultAggregator:
    """
    Sort match records by serial and drop repeated atoms.

    An atom that clashes with several atoms of the other molecule is matched
    once per partner. ``full`` mode keeps the first record of each atom.
    ``adjacent`` mode only removes a record that repeats the atom of the
    record right after it, which leaves duplicates in place when two atoms
    share a serial and their records interleave.
    """

    def __init__(self, mode: str = DEDUP_FULL):
        if mode not in DEDUP_MODES:
            raise ValueError(f"Unknown deduplication mode: {mode}")
        self.mode = mode

    def aggregate(self, matches: Sequence[MatchRecord]) -> List[MatchRecord]:
        """
        Return the surviving records in ascending serial order.

        Args:
            matches: Records in detection order

        Returns:
            New list; the input is left untouched
        """
        ordered = sorted(matches, key=lambda record: record.sort_key)
        if self.mode == DEDUP_ADJACENT:
            return self._drop_adjacent(ordered)
        return self._drop_all(ordered)

    @staticmethod
    def _drop_all(ordered: List[MatchRecord]) -> List[MatchRecord]:
        seen = set()
        result = []
        for record in ordered:
            if record.point in seen:
                continue
            seen.add(record.point)
            result.append(record)
        return result

    @staticmethod
    def _drop_adjacent(ordered: List[MatchRecord]) -> List[MatchRecord]:
        previous = None
        for i in range(len(ordered) - 1, -1, -1):
            match = ordered[i].point
            if match is previous:
                del ordered[i + 1]
            previous = match
        return ordered
