"""msdetect - Raw data format detection for mass-spectrometry files."""
from msdetect.core.detector import FormatDetector, detect, detect_format
from msdetect.core.engine import DetectionEngine
from msdetect.core.task import BaseTask, FileTypeDetectionTask
from msdetect.exceptions import MSDetectError, RawDataIOError
from msdetect.models.config import DetectionConfig
from msdetect.models.result import DetectionResult, FormatKind

try:
    from msdetect._version import __version__
except ImportError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "detect",
    "detect_format",
    "BaseTask",
    "DetectionConfig",
    "DetectionEngine",
    "DetectionResult",
    "FileTypeDetectionTask",
    "FormatDetector",
    "FormatKind",
    "MSDetectError",
    "RawDataIOError",
]
