#!/usr/bin/env python3
# src/stericoverlap/core/domain/models/coordinate.py

"""
Fixed-precision coordinate of any dimension.

Components are stored as ``decimal.Decimal`` values, which accumulate no
binary floating point drift across repeated additions and scalings.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Iterable, Iterator, Tuple, Union

from ...config import DECIMAL_PLACES
from ...exceptions import DimensionMismatchError

Number = Union[int, float, str, Decimal]

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(str(value))


@dataclass(frozen=True)
class Coordinate:
    """An ordered tuple of decimal components."""

    components: Tuple[Decimal, ...]

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> "Coordinate":
        """Build a coordinate keeping the full precision of the given text."""
        return cls(tuple(Decimal(v.strip()) for v in values))

    @classmethod
    def from_floats(cls, values: Iterable[float]) -> "Coordinate":
        """Build a coordinate, keeping only three decimal places (floor)."""
        return cls(
            tuple(
                Decimal(repr(float(v))).quantize(_QUANTUM, rounding=ROUND_FLOOR)
                for v in values
            )
        )

    @classmethod
    def zeros(cls, dimension: int) -> "Coordinate":
        return cls((Decimal(0),) * dimension)

    @property
    def dimension(self) -> int:
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self.components)

    def __getitem__(self, index: int) -> Decimal:
        return self.components[index]

    def _check_dimension(self, other: "Coordinate") -> None:
        if self.dimension != other.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension)

    def __add__(self, other: "Coordinate") -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        self._check_dimension(other)
        return Coordinate(tuple(a + b for a, b in zip(self.components, other.components)))

    def scale(self, factor: Number) -> "Coordinate":
        """Multiply every component by ``factor``."""
        factor = to_decimal(factor)
        return Coordinate(tuple(c * factor for c in self.components))

    def __mul__(self, factor: Number) -> "Coordinate":
        if isinstance(factor, Coordinate):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def distance(self, other: "Coordinate") -> float:
        """
        Euclidean distance to another coordinate.

        Differences and squares are computed exactly; only the final sum is
        converted to float for the square root.

        Args:
            other: Coordinate of the same dimension

        Returns:
            Distance between the two coordinates

        Raises:
            DimensionMismatchError: If the dimensions differ
        """
        self._check_dimension(other)
        total = sum(
            ((b - a) ** 2 for a, b in zip(self.components, other.components)),
            Decimal(0),
        )
        return math.sqrt(float(total))

    def compare(self, other: "Coordinate", dim: int) -> int:
        """Compare a single dimension; returns -1, 0 or 1."""
        self._check_dimension(other)
        a, b = self.components[dim], other.components[dim]
        return (a > b) - (a < b)

    def to_floats(self) -> Tuple[float, ...]:
        return tuple(float(c) for c in self.components)

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self.components) + ")"
