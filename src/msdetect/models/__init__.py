"""msdetect data models."""
from msdetect.models.config import DetectionConfig
from msdetect.models.result import DetectionResult, FormatKind

__all__ = [
    "DetectionConfig",
    "DetectionResult",
    "FormatKind",
]
