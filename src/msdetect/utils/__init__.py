"""msdetect utility functions."""
from msdetect.utils.logging import get_logger, set_log_level
from msdetect.utils.parallel import process_batch

__all__ = [
    "get_logger",
    "process_batch",
    "set_log_level",
]
