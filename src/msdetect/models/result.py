"""Detection result models."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator

from msdetect.exceptions import RawDataIOError


class FormatKind(str, Enum):
    """Raw data file formats recognised by the detector."""
    THERMO_RAW = "thermo_raw"
    NETCDF = "netcdf"
    MZML = "mzml"
    MZDATA = "mzdata"
    MZXML = "mzxml"
    WATERS_RAW = "waters_raw"
    AGILENT_CSV = "agilent_csv"
    UNSUPPORTED = "unsupported"

    @property
    def is_supported(self) -> bool:
        return self is not FormatKind.UNSUPPORTED


class DetectionResult(BaseModel):
    """Outcome of a single detection: a format kind or an I/O failure."""

    path: Path
    success: bool
    kind: FormatKind | None = None

    # Error handling
    error: str | None = None

    # Inspection details
    is_directory: bool = False
    header_size: int | None = None
    mime_type: str | None = None
    detection_time_ms: float | None = None

    @model_validator(mode="after")
    def check_outcome(self) -> "DetectionResult":
        # Exactly one of kind or error, chosen by success
        if self.success:
            if self.kind is None or self.error is not None:
                raise ValueError("a successful result needs a kind and no error")
        elif self.kind is not None or not self.error:
            raise ValueError("a failed result needs an error and no kind")
        return self

    def unwrap(self) -> FormatKind:
        """Return the detected kind, raising the recorded I/O failure otherwise."""
        if self.success:
            return self.kind
        raise RawDataIOError(self.error, path=self.path)

    def to_dict(self) -> dict[str, Any]:
        """Return full result as a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
