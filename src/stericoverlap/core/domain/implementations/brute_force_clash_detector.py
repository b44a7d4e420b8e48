"""Reference clash detection comparing every pair of atoms."""

from typing import Any

from ..interfaces.clash_detector import ClashDetector, DetectionOutcome
from ..models.match_record import MatchRecord
from ..models.point_set import PointSet


class BruteForceClashDetector(ClashDetector):
    """O(n*m) comparison of every atom of one set against every atom of the other."""

    name = "bruteforce"

    def search(self, outer: PointSet, inner: PointSet, prepared: Any = None) -> DetectionOutcome:
        outcome = DetectionOutcome()
        threshold = self.clash_threshold

        for atom in self._progress(outer):
            for other in inner:
                outcome.comparisons += 1
                if atom.clashes(other, threshold):
                    outcome.matches.append(MatchRecord.for_point(other))

        return outcome
