"""Cubic steric overlap detection between two molecular structures."""

__version__ = "1.0.0"
PROGRAM_NAME = "Cubic Steric Overlap Detector"
