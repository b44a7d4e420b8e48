"""Core domain models, interfaces and services for steric overlap detection."""

from .config import DetectionConfig
from .exceptions import (
    StericOverlapError,
    DimensionMismatchError,
    EmptyPointSetError,
    PointSetReadError,
    PDBFormatError,
)
from .domain.models.coordinate import Coordinate
from .domain.models.point import Point
from .domain.models.point_set import PointSet
from .domain.models.grid_index import GridIndex, NOT_FOUND
from .domain.models.cell_buckets import CellBuckets
from .domain.models.match_record import MatchRecord
from .domain.models.clash_result import ClashResult
from .domain.interfaces.clash_detector import ClashDetector, DetectionOutcome
from .domain.implementations import (
    BruteForceClashDetector,
    GridClashDetector,
    ResultAggregator,
    create_detector,
)
from .services.clash_detection_service import ClashDetectionService

__all__ = [
    "DetectionConfig",
    "StericOverlapError",
    "DimensionMismatchError",
    "EmptyPointSetError",
    "PointSetReadError",
    "PDBFormatError",
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
    "BruteForceClashDetector",
    "GridClashDetector",
    "ResultAggregator",
    "create_detector",
    "ClashDetectionService",
]
