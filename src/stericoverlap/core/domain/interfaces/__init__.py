"""Abstract interfaces of the domain layer."""

from .clash_detector import ClashDetector, DetectionOutcome

__all__ = ["ClashDetector", "DetectionOutcome"]
