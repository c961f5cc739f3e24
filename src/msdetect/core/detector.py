"""Raw data format detection from filesystem shape, extension and header bytes."""
from __future__ import annotations

import os
import stat
import time
from pathlib import Path

from msdetect.core.signatures import (
    AGILENT_CSV_SUFFIX,
    HEADER_SIZE,
    is_waters_function_file,
    match_header,
)
from msdetect.exceptions import RawDataIOError
from msdetect.models.config import DetectionConfig
from msdetect.models.result import DetectionResult, FormatKind
from msdetect.utils.logging import get_logger

logger = get_logger("detector")


def read_header(path: str | Path, size: int = HEADER_SIZE) -> bytes:
    """Read at most ``size`` leading bytes of a file in one bounded read."""
    with Path(path).open("rb") as fh:
        return fh.read(size)


def is_waters_directory(path: str | Path, follow_symlinks: bool = True) -> bool:
    """Check the immediate children of a directory for a _FUNCnnn.DAT file."""
    with os.scandir(path) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=follow_symlinks):
                continue
            if is_waters_function_file(entry.name):
                return True
    return False


class FormatDetector:
    """Detect the raw data format of a file or directory.

    The detector holds no per-request state and can be shared between
    threads working on different paths.
    """

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self.config = config or DetectionConfig()

    def detect_format(self, path: str | Path) -> FormatKind:
        """Classify a path.

        Args:
            path: File or directory to inspect.

        Returns:
            The detected kind, UNSUPPORTED when no rule matches.

        Raises:
            RawDataIOError: If the path cannot be stat'ed, listed or read.
        """
        kind, _, _ = self._classify(Path(path))
        return kind

    def detect(self, path: str | Path) -> DetectionResult:
        """Classify a path, returning the outcome instead of raising."""
        path = Path(path)
        start_time = time.perf_counter()

        try:
            kind, header, is_directory = self._classify(path)
        except RawDataIOError as e:
            if self.config.raise_on_error:
                raise
            return DetectionResult(
                path=path,
                success=False,
                error=str(e),
                detection_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        mime_type = None
        if header is not None and self.config.sniff_mimetype:
            mime_type = self._sniff_mimetype(header)

        return DetectionResult(
            path=path,
            success=True,
            kind=kind,
            is_directory=is_directory,
            header_size=len(header) if header is not None else None,
            mime_type=mime_type,
            detection_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def _classify(self, path: Path) -> tuple[FormatKind, bytes | None, bool]:
        """Apply the detection rules in order.

        Returns the kind, the header window if one was read, and whether
        the path is a directory.
        """
        try:
            st = os.stat(path, follow_symlinks=self.config.follow_symlinks)

            if stat.S_ISDIR(st.st_mode):
                if is_waters_directory(path, self.config.follow_symlinks):
                    logger.debug("%s: Waters function file found", path)
                    return FormatKind.WATERS_RAW, None, True
                # No other directory layout is recognised
                logger.debug("%s: directory without _FUNCnnn.DAT", path)
                return FormatKind.UNSUPPORTED, None, True

            if path.name.lower().endswith(AGILENT_CSV_SUFFIX):
                logger.debug("%s: matched by extension", path)
                return FormatKind.AGILENT_CSV, None, False

            header = read_header(path)
        except OSError as e:
            logger.warning("Cannot inspect %s: %s", path, e)
            raise RawDataIOError(
                f"Cannot inspect {path}: {e.strerror or e}",
                path=path,
                details={"errno": e.errno},
            ) from e

        kind = match_header(header)
        logger.debug("%s: %s from %d header bytes", path, kind.value, len(header))
        return kind, header, False

    @staticmethod
    def _sniff_mimetype(header: bytes) -> str | None:
        """Describe the header window with libmagic, for diagnostics only."""
        import magic

        try:
            return magic.from_buffer(header, mime=True)
        except magic.MagicException as e:
            logger.debug("MIME sniffing failed: %s", e)
            return None


def detect_format(path: str | Path) -> FormatKind:
    """Classify a raw data path, raising RawDataIOError on I/O failure."""
    return FormatDetector().detect_format(path)


def detect(
    path: str | Path,
    config: DetectionConfig | None = None,
) -> DetectionResult:
    """Classify a raw data path.

    This is the main entry point for the library.

    Args:
        path: File or directory to inspect
        config: Detection configuration

    Returns:
        DetectionResult holding either the format kind or the I/O failure
    """
    return FormatDetector(config).detect(path)
