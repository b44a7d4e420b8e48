#!/usr/bin/env python3
# src/stericoverlap/core/domain/models/point.py

"""
Domain model representing one atom as a labelled point.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .coordinate import Coordinate


@dataclass(eq=False)
class Point:
    """
    An atom centre with its PDB metadata.

    Equality and hashing are identity based: two atoms read from different
    lines are never the same point, even with identical fields.
    """

    serial: int
    centre: Coordinate
    atom_name: str = ""
    alt_loc: str = ""
    residue_name: str = ""
    chain_id: str = ""
    residue_seq: int = 0
    insertion_code: str = ""
    neighbor_cells: Optional[FrozenSet[int]] = field(default=None, repr=False)

    @property
    def dimension(self) -> int:
        return self.centre.dimension

    def distance(self, other: "Point") -> float:
        return self.centre.distance(other.centre)

    def clashes(self, other: "Point", threshold: float) -> bool:
        """Whether the two spheres overlap, i.e. their centres are closer than ``threshold``."""
        return self.distance(other) < threshold
