#!/usr/bin/env python3
# src/stericoverlap/core/domain/models/point_set.py

"""
Ordered collection of points read from one structure file.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .coordinate import Coordinate
from .point import Point


class PointSet:
    """Atoms of one molecule, in file order."""

    def __init__(self, points: Optional[Sequence[Point]] = None, label: str = ""):
        """
        Initialize a PointSet.

        Args:
            points: Points in input order
            label: Name of the source, usually the file path
        """
        self.points: List[Point] = list(points or [])
        self.label = label

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def append(self, point: Point) -> None:
        self.points.append(point)

    @property
    def dimension(self) -> int:
        return self.points[0].dimension if self.points else 0

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all points.

        Returns:
            numpy array of shape (n_points, dimension)
        """
        return np.array([p.centre.to_floats() for p in self.points], dtype=float)

    def bounding_volume(self, margin: float) -> Tuple[Coordinate, Coordinate]:
        """
        Smallest and largest coordinate in each dimension, padded by ``margin``.

        Args:
            margin: Distance subtracted from every minimum and added to every maximum

        Returns:
            Tuple of (minimum, maximum) coordinates

        Raises:
            ValueError: If the set is empty
        """
        if not self.points:
            raise ValueError(f"Cannot compute bounding volume of empty point set {self.label!r}")
        coords = self.get_coordinates()
        lower = coords.min(axis=0) - margin
        upper = coords.max(axis=0) + margin
        return Coordinate.from_floats(lower.tolist()), Coordinate.from_floats(upper.tolist())
