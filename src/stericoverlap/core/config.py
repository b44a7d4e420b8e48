"""Run configuration for clash detection."""

from dataclasses import dataclass

DEFAULT_ATOM_RADIUS = 2.0
DEFAULT_BOUND_MARGIN = 0.001
DECIMAL_PLACES = 3

GRID_METHOD = "grid"
BRUTE_FORCE_METHOD = "bruteforce"
METHOD_ALIASES = {
    "grid": GRID_METHOD,
    "hash": GRID_METHOD,
    "h": GRID_METHOD,
    "bruteforce": BRUTE_FORCE_METHOD,
    "brute": BRUTE_FORCE_METHOD,
    "b": BRUTE_FORCE_METHOD,
}

DEDUP_FULL = "full"
DEDUP_ADJACENT = "adjacent"
DEDUP_MODES = (DEDUP_FULL, DEDUP_ADJACENT)


@dataclass
class DetectionConfig:
    """Settings shared by the detectors, the aggregator and the service."""

    atom_radius: float = DEFAULT_ATOM_RADIUS
    method: str = GRID_METHOD
    dedup: str = DEDUP_FULL
    bound_margin: float = DEFAULT_BOUND_MARGIN
    show_progress: bool = False

    @property
    def clash_threshold(self) -> float:
        """Centre-to-centre distance below which two atoms overlap."""
        return self.atom_radius * 2

    @property
    def canonical_method(self) -> str:
        return METHOD_ALIASES[self.method.lower()]

    def validate(self) -> "DetectionConfig":
        """
        Check the configuration values.

        Returns:
            The configuration itself, so calls can be chained

        Raises:
            ValueError: If a value is out of range or unknown
        """
        if self.atom_radius <= 0:
            raise ValueError(f"Atom radius must be positive, got {self.atom_radius}")
        if self.bound_margin <= 0:
            raise ValueError(f"Bound margin must be positive, got {self.bound_margin}")
        if self.method.lower() not in METHOD_ALIASES:
            raise ValueError(f"Unknown comparison method: {self.method}")
        if self.dedup not in DEDUP_MODES:
            raise ValueError(f"Unknown deduplication mode: {self.dedup}")
        return self
