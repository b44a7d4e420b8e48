"""Domain model for clash detection results."""

from dataclasses import dataclass, field
from typing import List

from .match_record import MatchRecord


@dataclass
class ClashResult:
    """Contains results from clash detection."""

    has_clashes: bool
    num_clashes: int
    matches: List[MatchRecord] = field(default_factory=list)
    comparisons: int = 0
    method: str = ""

    @classmethod
    def from_matches(
        cls, matches: List[MatchRecord], comparisons: int, method: str
    ) -> "ClashResult":
        return cls(
            has_clashes=len(matches) > 0,
            num_clashes=len(matches),
            matches=list(matches),
            comparisons=comparisons,
            method=method,
        )
