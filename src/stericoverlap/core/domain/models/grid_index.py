#!/usr/bin/env python3
# src/stericoverlap/core/domain/models/grid_index.py

"""
Uniform grid partition of a bounding volume.

The volume spanned by ``minimum`` and ``maximum`` is cut into cubic cells
("containers") whose edge equals the clash threshold. Two atoms closer than
the threshold can then differ by at most one cell in each dimension, so the
3**dimension cells around an atom hold every possible clash partner.

Cells are addressed by a single integer ordinal. For two dimensions the
ordinal is ``y * nx + x``; for three it is ``z * ny * nx + y * nx + x``.

Per-dimension indices run from 0 to ``cell_counts[d]`` inclusive: an offset
lying exactly on the lower boundary stays in cell 0, any positive offset
rounds up. Index ``cell_counts[d]`` in one dimension therefore shares its
ordinal with index 0 of the next cell along the following dimension. This
only adds candidates; the exact distance test removes them again.
"""

import itertools
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
from typing import FrozenSet, Iterable, List, Tuple

from ...exceptions import DimensionMismatchError
from .coordinate import Coordinate, Number, to_decimal
from .point import Point
from .point_set import PointSet

NOT_FOUND = -1

_OFFSETS = (-1, 0, 1)


class GridIndex:
    """Maps coordinates to cell ordinals inside a fixed bounding volume."""

    def __init__(self, cell_size: Number, minimum: Coordinate, maximum: Coordinate):
        """
        Initialize the grid.

        Args:
            cell_size: Edge length of one cell, equal to the clash threshold
            minimum: Lowest corner of the volume
            maximum: Highest corner of the volume

        Raises:
            DimensionMismatchError: If the corners differ in dimension
            ValueError: If the cell size is not positive
        """
        if minimum.dimension != maximum.dimension:
            raise DimensionMismatchError(minimum.dimension, maximum.dimension)
        cell_size = to_decimal(cell_size)
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")

        self._cell_size = cell_size
        self._minimum = minimum
        self._maximum = maximum
        self._cell_counts: Tuple[int, ...] = tuple(
            max(1, int(((hi - lo) / cell_size).to_integral_value(rounding=ROUND_CEILING)))
            for lo, hi in zip(minimum, maximum)
        )
        # Upper limit of the last cell in each dimension.
        self._upper: Tuple[Decimal, ...] = tuple(
            lo + count * cell_size for lo, count in zip(minimum, self._cell_counts)
        )

    @classmethod
    def from_points(cls, points: PointSet, cell_size: Number, margin: float) -> "GridIndex":
        """Build a grid over the padded bounding volume of ``points``."""
        minimum, maximum = points.bounding_volume(margin)
        return cls(cell_size, minimum, maximum)

    @property
    def cell_size(self) -> Decimal:
        return self._cell_size

    @property
    def minimum(self) -> Coordinate:
        return self._minimum

    @property
    def maximum(self) -> Coordinate:
        return self._maximum

    @property
    def cell_counts(self) -> Tuple[int, ...]:
        return self._cell_counts

    @property
    def dimension(self) -> int:
        return self._minimum.dimension

    def _check(self, location: Coordinate) -> None:
        if location.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, location.dimension)

    def contains(self, location: Coordinate) -> bool:
        """Whether ``location`` lies inside the grid in every dimension."""
        self._check(location)
        for dim in range(self.dimension):
            if location.compare(self._minimum, dim) < 0 or location[dim] > self._upper[dim]:
                return False
        return True

    def _index_for_dimension(self, value: Decimal, dim: int) -> int:
        offset = value - self._minimum[dim]
        div = offset / self._cell_size
        rounding = ROUND_CEILING if offset > 0 else ROUND_FLOOR
        return int(div.to_integral_value(rounding=rounding))

    def cell_of(self, location: Coordinate) -> int:
        """
        Ordinal of the cell containing ``location``.

        Args:
            location: Coordinate of the grid's dimension

        Returns:
            Cell ordinal, or NOT_FOUND if the location is outside the grid
        """
        if not self.contains(location):
            return NOT_FOUND

        ordinal = 0
        for dim in reversed(range(self.dimension)):
            ordinal = ordinal * self._cell_counts[dim] + self._index_for_dimension(
                location[dim], dim
            )
        return ordinal

    def neighbors_of(self, location: Coordinate) -> FrozenSet[int]:
        """
        Ordinals of the cell of ``location`` and of every adjacent cell.

        Each dimension is shifted by -1, 0 or +1 cell, giving up to
        3**dimension cells. Shifted locations outside the grid are skipped.
        """
        self._check(location)
        ordinals = set()
        for offsets in itertools.product(_OFFSETS, repeat=self.dimension):
            shifted = location + Coordinate(tuple(Decimal(o) for o in offsets)).scale(
                self._cell_size
            )
            if self.contains(shifted):
                ordinals.add(self.cell_of(shifted))
        return frozenset(ordinals)

    def annotate(self, points: Iterable[Point]) -> List[Point]:
        """Cache the neighbour cells of each point on the point itself."""
        annotated = []
        for point in points:
            point.neighbor_cells = self.neighbors_of(point.centre)
            annotated.append(point)
        return annotated

    def __repr__(self) -> str:
        return (
            f"GridIndex(cell_size={self._cell_size}, minimum={self._minimum}, "
            f"maximum={self._maximum}, cell_counts={self._cell_counts})"
        )
