"""Clash detection strategies and result aggregation."""

from ...config import BRUTE_FORCE_METHOD, DEFAULT_BOUND_MARGIN, GRID_METHOD, METHOD_ALIASES
from ..interfaces.clash_detector import ClashDetector
from .brute_force_clash_detector import BruteForceClashDetector
from .grid_clash_detector import GridClashDetector
from .result_aggregator import ResultAggregator


def create_detector(
    method: str,
    atom_radius: float,
    show_progress: bool = False,
    bound_margin: float = DEFAULT_BOUND_MARGIN,
) -> ClashDetector:
    """
    Create the detector registered under ``method`` or one of its aliases.

    Raises:
        ValueError: If the method is unknown
    """
    canonical = METHOD_ALIASES.get(method.lower())
    if canonical == GRID_METHOD:
        return GridClashDetector(atom_radius, show_progress, bound_margin)
    if canonical == BRUTE_FORCE_METHOD:
        return BruteForceClashDetector(atom_radius, show_progress)
    raise ValueError(f"Unknown comparison method: {method}")


__all__ = [
    "BruteForceClashDetector",
    "GridClashDetector",
    "ResultAggregator",
    "create_detector",
]
