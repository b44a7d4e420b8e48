"""Interface for clash detection strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, List

from tqdm import tqdm

from ...exceptions import EmptyPointSetError
from ..models.match_record import MatchRecord
from ..models.point_set import PointSet


@dataclass
class DetectionOutcome:
    """Raw matches of one detector run, before aggregation."""

    matches: List[MatchRecord] = field(default_factory=list)
    comparisons: int = 0


class ClashDetector(ABC):
    """Abstract base class for clash detection strategies."""

    name = ""

    def __init__(self, atom_radius: float, show_progress: bool = False):
        """
        Initialize the detector.

        Args:
            atom_radius: Radius shared by every atom of both sets
            show_progress: Show a progress bar over the outer set
        """
        if atom_radius <= 0:
            raise ValueError(f"Atom radius must be positive, got {atom_radius}")
        self.atom_radius = atom_radius
        self.show_progress = show_progress

    @property
    def clash_threshold(self) -> float:
        return self.atom_radius * 2

    def detect(self, outer: PointSet, inner: PointSet) -> DetectionOutcome:
        """
        Find every atom of ``inner`` that clashes with an atom of ``outer``.

        Args:
            outer: Point set iterated in the outer loop
            inner: Point set searched for clash partners

        Returns:
            DetectionOutcome with one MatchRecord per clashing pair

        Raises:
            EmptyPointSetError: If either set has no points
        """
        self.check_inputs(outer, inner)
        return self.search(outer, inner, self.prepare(outer, inner))

    @staticmethod
    def check_inputs(outer: PointSet, inner: PointSet) -> None:
        """Raise EmptyPointSetError if either set has no points."""
        for points in (outer, inner):
            if len(points) == 0:
                raise EmptyPointSetError(f"Point set {points.label!r} contains no atoms")

    def prepare(self, outer: PointSet, inner: PointSet) -> Any:
        """Work done once before the search. Nothing by default."""
        return None

    @abstractmethod
    def search(self, outer: PointSet, inner: PointSet, prepared: Any) -> DetectionOutcome:
        """Strategy specific search over two non-empty point sets."""
        pass

    def _progress(self, points: PointSet) -> Iterable:
        return tqdm(
            points,
            desc=f"Comparing atoms ({self.name})",
            total=len(points),
            disable=not self.show_progress,
        )
