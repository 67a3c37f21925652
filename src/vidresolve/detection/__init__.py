"""Reference detection module."""

from .reference import DetectionResult, ReferenceDetector

__all__ = ["DetectionResult", "ReferenceDetector"]
