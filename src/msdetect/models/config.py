"""Detection configuration."""
from __future__ import annotations

from pydantic import BaseModel, Field


class DetectionConfig(BaseModel):
    """Options for the layers around the detection algorithm.

    The algorithm itself takes no options beyond the input path; these
    settings only affect diagnostics, error propagation and batching.
    """

    # Diagnostics
    sniff_mimetype: bool = False

    # Error handling
    raise_on_error: bool = False

    # Filesystem
    follow_symlinks: bool = True

    # Performance
    max_workers: int = Field(default=4, ge=1)

    @classmethod
    def strict(cls) -> "DetectionConfig":
        """Preset that surfaces I/O failures as exceptions."""
        return cls(raise_on_error=True)
