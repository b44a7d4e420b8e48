"""Candidate clash found during detection."""

from dataclasses import dataclass

from .point import Point


@dataclass(frozen=True)
class MatchRecord:
    """A matched point from the opposing set, keyed by its serial."""

    sort_key: int
    point: Point

    @classmethod
    def for_point(cls, point: Point) -> "MatchRecord":
        return cls(sort_key=point.serial, point=point)
