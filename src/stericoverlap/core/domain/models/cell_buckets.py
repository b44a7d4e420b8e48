#!/usr/bin/env python3
# src/stericoverlap/core/domain/models/cell_buckets.py

"""
Per-cell storage of the indexed point set.
"""

from typing import Dict, Iterator, List, Tuple

from .grid_index import GridIndex, NOT_FOUND
from .point import Point
from .point_set import PointSet


class CellBuckets:
    """
    Points grouped by cell ordinal.

    Every entry keeps the ordinal it was inserted under, and lookups compare
    it again. With Python integers two distinct cells never share a key, so
    the check is a safety net rather than something results depend on.
    """

    def __init__(self):
        self._entries: Dict[int, List[Tuple[int, Point]]] = {}

    @classmethod
    def from_points(cls, grid: GridIndex, points: PointSet) -> "CellBuckets":
        """Insert every point inside ``grid`` under its cell ordinal."""
        buckets = cls()
        for point in points:
            ordinal = grid.cell_of(point.centre)
            if ordinal == NOT_FOUND:
                continue
            buckets.insert(ordinal, point)
        return buckets

    def insert(self, ordinal: int, point: Point) -> bool:
        """
        Store ``point`` under ``ordinal``.

        Returns:
            False if this exact point was already stored under the ordinal
        """
        entries = self._entries.setdefault(ordinal, [])
        for stored_ordinal, stored_point in entries:
            if stored_ordinal == ordinal and stored_point is point:
                return False
        entries.append((ordinal, point))
        return True

    def lookup(self, ordinal: int) -> Tuple[Point, ...]:
        """Points stored under ``ordinal``, in insertion order."""
        entries = self._entries.get(ordinal)
        if not entries:
            return ()
        return tuple(point for stored, point in entries if stored == ordinal)

    def ordinals(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())

    def __contains__(self, ordinal: int) -> bool:
        return ordinal in self._entries
