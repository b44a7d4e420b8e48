"""Core domain models and interfaces."""

from .models.coordinate import Coordinate
from .models.point import Point
from .models.point_set import PointSet
from .models.grid_index import GridIndex, NOT_FOUND
from .models.cell_buckets import CellBuckets
from .models.match_record import MatchRecord
from .models.clash_result import ClashResult
from .interfaces.clash_detector import ClashDetector, DetectionOutcome

__all__ = [
    "Coordinate",
    "Point",
    "PointSet",
    "GridIndex",
    "NOT_FOUND",
    "CellBuckets",
    "MatchRecord",
    "ClashResult",
    "ClashDetector",
    "DetectionOutcome",
]
