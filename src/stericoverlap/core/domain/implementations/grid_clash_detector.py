"""Clash detection through a uniform grid of cells sized to the clash threshold."""

import logging
from typing import Optional, Tuple

from ...config import DEFAULT_BOUND_MARGIN
from ..interfaces.clash_detector import ClashDetector, DetectionOutcome
from ..models.cell_buckets import CellBuckets
from ..models.grid_index import GridIndex
from ..models.match_record import MatchRecord
from ..models.point_set import PointSet

logger = logging.getLogger(__name__)


class GridClashDetector(ClashDetector):
    """
    Compare each atom only against atoms in its own and adjacent cells.

    The grid is built over the inner set. Each outer atom looks up at most
    3**dimension cells, so the number of comparisons grows linearly with the
    size of the molecules instead of with their product.

    The bound margin must be positive. Cell 0 of each dimension then holds
    no inner atom, and the -1 shift of an outer atom never needs a cell
    below the grid minimum.
    """

    name = "grid"

    def __init__(
        self,
        atom_radius: float,
        show_progress: bool = False,
        bound_margin: float = DEFAULT_BOUND_MARGIN,
    ):
        super().__init__(atom_radius, show_progress)
        if bound_margin <= 0:
            raise ValueError(f"Bound margin must be positive, got {bound_margin}")
        self.bound_margin = bound_margin

    def prepare(self, outer: PointSet, inner: PointSet) -> Tuple[GridIndex, CellBuckets]:
        """
        Build the grid over ``inner``, fill its buckets and cache the
        neighbour cells of every atom of ``outer``.
        """
        grid = GridIndex.from_points(inner, self.clash_threshold, self.bound_margin)
        buckets = CellBuckets.from_points(grid, inner)
        grid.annotate(outer)
        logger.debug(f"Built {grid!r} holding {len(buckets)} atoms")
        return grid, buckets

    def search(
        self,
        outer: PointSet,
        inner: PointSet,
        prepared: Optional[Tuple[GridIndex, CellBuckets]] = None,
    ) -> DetectionOutcome:
        """
        Look up the neighbour cells of each outer atom in the buckets.

        Atoms without cached neighbour cells are annotated with the grid
        on the way. The grid and buckets are built when not given.
        """
        grid, buckets = prepared if prepared is not None else self.prepare(outer, inner)
        outcome = DetectionOutcome()
        threshold = self.clash_threshold

        for atom in self._progress(outer):
            cells = atom.neighbor_cells
            if cells is None:
                cells = atom.neighbor_cells = grid.neighbors_of(atom.centre)

            for ordinal in sorted(cells):
                for other in buckets.lookup(ordinal):
                    outcome.comparisons += 1
                    if atom.clashes(other, threshold):
                        outcome.matches.append(MatchRecord.for_point(other))

        return outcome
