"""Constant header table for raw data format detection."""
from __future__ import annotations

import re
from typing import NamedTuple

from msdetect.models.result import FormatKind

# Number of leading bytes inspected in a regular file
HEADER_SIZE = 1024

# See "https://code.google.com/p/unfinnigan/wiki/FileHeader"
THERMO_HEADER = b"\x01\xa1" + "Finnigan".encode("utf-16-le")

# See "http://www.unidata.ucar.edu/software/netcdf/docs/netcdf/File-Format-Specification.html"
CDF_HEADER = b"CDF"

# Indexed mzML files open with <indexedmzML><mzML>, plain ones with <mzML> only
MZML_HEADER = b"<mzML"

# See "http://www.psidev.info/sites/default/files/mzdata.xsd.txt"
MZDATA_HEADER = b"<mzData"

# Indexed mzXML files open with <mzXML><msRun>, plain ones with <msRun> only
MZXML_HEADER = b"<msRun"

# Waters .raw directories hold one _FUNCnnn.DAT file per acquisition function
WATERS_FUNCTION_FILE = re.compile(r"_FUNC[0-9]{3}\.DAT")

AGILENT_CSV_SUFFIX = ".csv"


class HeaderSignature(NamedTuple):
    """A byte pattern identifying one format.

    Anchored signatures must occur at offset 0; the others may occur
    anywhere inside the header window.
    """

    kind: FormatKind
    pattern: bytes
    anchored: bool

    def matches(self, header: bytes) -> bool:
        if self.anchored:
            return header.startswith(self.pattern)
        return self.pattern in header


# First match wins
HEADER_SIGNATURES: tuple[HeaderSignature, ...] = (
    HeaderSignature(FormatKind.THERMO_RAW, THERMO_HEADER, anchored=True),
    HeaderSignature(FormatKind.NETCDF, CDF_HEADER, anchored=True),
    HeaderSignature(FormatKind.MZML, MZML_HEADER, anchored=False),
    HeaderSignature(FormatKind.MZDATA, MZDATA_HEADER, anchored=False),
    HeaderSignature(FormatKind.MZXML, MZXML_HEADER, anchored=False),
)


def match_header(header: bytes) -> FormatKind:
    """Classify a header window against the signature table.

    Args:
        header: Leading bytes of a file, at most HEADER_SIZE long.

    Returns:
        The kind of the first matching signature, or UNSUPPORTED.
    """
    window = header[:HEADER_SIZE]
    for signature in HEADER_SIGNATURES:
        if signature.matches(window):
            return signature.kind
    return FormatKind.UNSUPPORTED


def is_waters_function_file(name: str) -> bool:
    """Check whether a file name follows the Waters _FUNCnnn.DAT convention."""
    return WATERS_FUNCTION_FILE.fullmatch(name) is not None
