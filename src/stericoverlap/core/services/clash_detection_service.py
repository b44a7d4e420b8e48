"""Service running a full clash detection between two structures."""

import logging
from typing import Optional, TextIO, Tuple

from ..config import DetectionConfig
from ..domain.implementations import ResultAggregator, create_detector
from ..domain.interfaces.clash_detector import ClashDetector
from ..domain.models.clash_result import ClashResult
from ..domain.models.point_set import PointSet
from ..exceptions import EmptyPointSetError, PointSetReadError
from ..utils.benchmarking import PerformanceStats, timer

logger = logging.getLogger(__name__)


class ClashDetectionService:
    """
    Finds the atoms of a second molecule that overlap atoms of a first one.

    The service reads both structures and lets the detector build its search
    structures. It then runs the search, aggregates the matches and hands
    them to a report writer. Reading and building are timed together as
    ``precalculation``; every phase is collected in ``self.stats``.
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        detector: Optional[ClashDetector] = None,
        reader=None,
        writer=None,
    ):
        """
        Initialize service with its collaborators.

        Args:
            config: Run configuration, defaults to DetectionConfig()
            detector: Detection strategy, created from the config when omitted
            reader: Object with a ``read(path) -> PointSet`` method
            writer: Object with a ``write(matches, fhandle)`` method
        """
        from ...infrastructure.readers.pdb_atom_reader import PDBAtomReader
        from ...infrastructure.writers.clash_report_writer import ClashReportWriter

        self.config = (config or DetectionConfig()).validate()
        self._detector = detector or create_detector(
            self.config.canonical_method,
            self.config.atom_radius,
            show_progress=self.config.show_progress,
            bound_margin=self.config.bound_margin,
        )
        self._aggregator = ResultAggregator(self.config.dedup)
        self._reader = reader or PDBAtomReader()
        self._writer = writer or ClashReportWriter()
        self.stats = PerformanceStats()

    @property
    def detector(self) -> ClashDetector:
        return self._detector

    def load(self, first_path: str, second_path: str) -> Tuple[PointSet, PointSet]:
        """
        Read both structures.

        Raises:
            PointSetReadError: If a file cannot be read or parsed
            EmptyPointSetError: If a file holds no atom records
        """
        first = self._reader.read(first_path)
        second = self._reader.read(second_path)
        for points in (first, second):
            if len(points) == 0:
                raise EmptyPointSetError(f"No atoms found in {points.label}")
        logger.info(f"Size of molecules: {len(first)} atoms and {len(second)} atoms.")
        return first, second

    def detect(self, outer: PointSet, inner: PointSet) -> ClashResult:
        """
        Detect the atoms of ``inner`` clashing with atoms of ``outer``.

        Args:
            outer: First molecule
            inner: Second molecule, whose clashing atoms are reported

        Returns:
            ClashResult with the sorted, deduplicated matches

        Raises:
            EmptyPointSetError: If either set has no points
            DimensionMismatchError: If the sets mix coordinate dimensions
        """
        self._detector.check_inputs(outer, inner)
        with timer("precalculation", self.stats):
            prepared = self._detector.prepare(outer, inner)
        logger.info(
            f"Time taken for pre-calculations: {self.stats.elapsed_ms('precalculation')} ms."
        )

        with timer("detection", self.stats):
            outcome = self._detector.search(outer, inner, prepared)
        with timer("aggregation", self.stats):
            matches = self._aggregator.aggregate(outcome.matches)

        logger.info(
            f"For the {self._detector.name} method: {len(matches)} matches found. "
            f"Comparisons needed: {outcome.comparisons}. "
            f"Time taken: {self.stats.elapsed_ms('detection') + self.stats.elapsed_ms('aggregation')} ms."
        )
        return ClashResult.from_matches(matches, outcome.comparisons, self._detector.name)

    def run(self, first_path: str, second_path: str, output: TextIO) -> bool:
        """
        Read two PDB files, detect clashes and write the report to ``output``.

        Recoverable failures (unreadable or empty input) are logged and
        reported through the return value; nothing is written in that case.

        Returns:
            True if the report was written, False otherwise
        """
        self.stats = PerformanceStats()
        with timer("total", self.stats):
            try:
                with timer("precalculation", self.stats):
                    first, second = self.load(first_path, second_path)
                result = self.detect(first, second)
            except (PointSetReadError, EmptyPointSetError) as e:
                logger.error(str(e))
                logger.error("Failed to do pre-calculations. Quitting.")
                return False

            with timer("report", self.stats):
                self._writer.write(result.matches, output)

        logger.info(f"Total time taken: {self.stats.elapsed_ms('total')} ms.")
        logger.debug("Performance summary:\n" + self.stats.report())
        return True
