"""End-to-end tests for the msdetect public API."""
from __future__ import annotations

from pathlib import Path

import pytest

from msdetect import (
    DetectionConfig,
    DetectionEngine,
    DetectionResult,
    FileTypeDetectionTask,
    FormatKind,
    RawDataIOError,
    __version__,
    detect,
    detect_format,
)


# ---------------------------------------------------------------------------
# Helper fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def raw_tree(tmp_path: Path) -> dict[FormatKind, Path]:
    """Create one sample of every recognised format."""
    thermo = tmp_path / "thermo.raw"
    thermo.write_bytes(b"\x01\xa1" + "Finnigan".encode("utf-16-le") + b"\x00" * 64)

    netcdf = tmp_path / "sample.cdf"
    netcdf.write_bytes(b"CDF\x01" + b"\x00" * 64)

    mzml = tmp_path / "sample.mzML"
    mzml.write_text(
        '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
        '<indexedmzML><mzML version="1.1.0"></mzML></indexedmzML>\n'
    )

    mzdata = tmp_path / "sample.mzData"
    mzdata.write_text('<?xml version="1.0"?>\n<mzData version="1.05"></mzData>\n')

    mzxml = tmp_path / "sample.mzXML"
    mzxml.write_text('<?xml version="1.0"?>\n<mzXML><msRun></msRun></mzXML>\n')

    waters = tmp_path / "waters.raw"
    waters.mkdir()
    (waters / "_FUNC001.DAT").write_bytes(b"\x00" * 32)

    agilent = tmp_path / "agilent.CSV"
    agilent.write_text("#Point,X(Thompsons),Y(Counts)\n")

    other = tmp_path / "notes.txt"
    other.write_text("nothing to see here")

    return {
        FormatKind.THERMO_RAW: thermo,
        FormatKind.NETCDF: netcdf,
        FormatKind.MZML: mzml,
        FormatKind.MZDATA: mzdata,
        FormatKind.MZXML: mzxml,
        FormatKind.WATERS_RAW: waters,
        FormatKind.AGILENT_CSV: agilent,
        FormatKind.UNSUPPORTED: other,
    }


def test_version_is_string():
    assert isinstance(__version__, str)


def test_every_format_detected(raw_tree):
    for kind, path in raw_tree.items():
        assert detect_format(path) == kind, path


def test_detect_results_unwrap(raw_tree):
    for kind, path in raw_tree.items():
        result = detect(path)
        assert isinstance(result, DetectionResult)
        assert result.unwrap() == kind


def test_tasks_report_progress(raw_tree):
    for kind, path in raw_tree.items():
        task = FileTypeDetectionTask(path)
        assert task.finished_percentage == 0.0
        task.execute()
        assert task.finished_percentage == 1.0
        assert task.result == kind


def test_batch_matches_single_detection(raw_tree):
    engine = DetectionEngine(DetectionConfig(max_workers=3))
    results = dict(engine.detect_batch(raw_tree.values()))

    for kind, path in raw_tree.items():
        assert results[path].kind == kind

    summary = DetectionEngine.summarize(results.values())
    assert sum(summary.values()) == len(raw_tree)
    assert all(count == 1 for count in summary.values())


def test_repeated_detection_is_stable(raw_tree):
    first = [detect_format(p) for p in raw_tree.values()]
    second = [detect_format(p) for p in raw_tree.values()]
    assert first == second


def test_missing_path_surfaces_io_error(tmp_path):
    result = detect(tmp_path / "gone.mzML")
    assert result.success is False
    with pytest.raises(RawDataIOError):
        result.unwrap()
