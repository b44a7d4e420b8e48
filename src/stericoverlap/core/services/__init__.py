"""Core business logic services."""

from .clash_detection_service import ClashDetectionService

__all__ = ["ClashDetectionService"]
