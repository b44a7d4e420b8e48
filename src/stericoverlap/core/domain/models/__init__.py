"""Domain models for steric overlap detection."""

from .coordinate import Coordinate
from .point import Point
from .point_set import PointSet
from .grid_index import GridIndex, NOT_FOUND
from .cell_buckets import CellBuckets
from .match_record import MatchRecord
from .clash_result import ClashResult

__all__ = [
    "Coordinate",
    "Point",
    "PointSet",
    "GridIndex",
    "NOT_FOUND",
    "CellBuckets",
    "MatchRecord",
    "ClashResult",
]
