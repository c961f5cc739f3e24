"""Progress-reporting task interface and the detection task."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from msdetect.core.detector import FormatDetector
from msdetect.models.result import FormatKind

T = TypeVar("T")


class BaseTask(ABC, Generic[T]):
    """Abstract base class for long-running toolkit operations.

    A task is created per request, executed once and discarded once its
    result has been read.
    """

    @abstractmethod
    def execute(self) -> None:
        """Run the task to completion."""
        ...

    @property
    @abstractmethod
    def finished_percentage(self) -> float:
        """Completed fraction of the work, between 0.0 and 1.0."""
        ...

    @property
    @abstractmethod
    def result(self) -> T | None:
        """Task result, None until execute() has completed."""
        ...

    @abstractmethod
    def cancel(self) -> None:
        """Request cancellation."""
        ...


class FileTypeDetectionTask(BaseTask[FormatKind]):
    """Detect the raw data format of one path."""

    def __init__(
        self,
        path: str | Path,
        detector: FormatDetector | None = None,
    ) -> None:
        self.path = Path(path)
        self._detector = detector or FormatDetector()
        self._result: FormatKind | None = None
        self._finished_percentage = 0.0
        self._executed = False

    def execute(self) -> None:
        """Classify the path.

        Raises:
            RawDataIOError: If the path cannot be inspected.
            RuntimeError: If the task has already been executed.
        """
        if self._executed:
            raise RuntimeError(f"Detection task for {self.path} already executed")
        self._executed = True

        self._result = self._detector.detect_format(self.path)
        self._finished_percentage = 1.0

    @property
    def finished_percentage(self) -> float:
        return self._finished_percentage

    @property
    def result(self) -> FormatKind | None:
        return self._result

    def cancel(self) -> None:
        # Too fast to be cancelled
        pass
