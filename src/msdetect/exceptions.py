"""Exception hierarchy for msdetect.

All library exceptions inherit from MSDetectError so callers can catch
broadly or narrowly as needed.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any


class MSDetectError(Exception):
    """Base exception for all msdetect errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.details = details or {}
        super().__init__(message)


class RawDataIOError(MSDetectError):
    """A raw data path could not be opened, listed or read."""
    pass
