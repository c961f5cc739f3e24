"""Batch detection engine."""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

from msdetect.core.detector import FormatDetector
from msdetect.models.config import DetectionConfig
from msdetect.models.result import DetectionResult, FormatKind
from msdetect.utils.logging import get_logger
from msdetect.utils.parallel import process_batch

logger = get_logger("engine")


class DetectionEngine:
    """Classify many raw data paths in parallel."""

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self.config = config or DetectionConfig()
        self._detector = FormatDetector(self.config)

    def detect(self, path: str | Path) -> DetectionResult:
        """Classify a single path."""
        return self._detector.detect(path)

    def detect_batch(
        self,
        paths: Iterable[str | Path],
        show_progress: bool = False,
    ) -> Iterator[tuple[Path, DetectionResult]]:
        """Classify paths concurrently, yielding results as they complete.

        Paths are independent, so there is no ordering guarantee between
        the yielded pairs.
        """
        from rich.console import Console
        from rich.progress import Progress, SpinnerColumn, TextColumn

        items = [Path(p) for p in paths]

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=Console(stderr=True),
            disable=not show_progress,
        ) as progress:
            task = progress.add_task("Detecting...", total=len(items))
            for path, outcome in process_batch(
                items,
                self._detector.detect,
                max_workers=self.config.max_workers,
            ):
                if isinstance(outcome, Exception):
                    if self.config.raise_on_error:
                        raise outcome
                    logger.error("Detection of %s failed: %s", path, outcome)
                    outcome = DetectionResult(
                        path=path,
                        success=False,
                        error=str(outcome) or type(outcome).__name__,
                    )
                progress.advance(task)
                yield path, outcome

    @staticmethod
    def summarize(results: Iterable[DetectionResult]) -> dict[FormatKind, int]:
        """Count successful results per format kind."""
        counts = Counter(r.kind for r in results if r.success and r.kind is not None)
        return dict(counts)
