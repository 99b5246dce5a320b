"""1D .cube file reading and writing.

Layout written:
    TITLE <title>
    LUT_1D_SIZE 256
    <r> <g> <b>      (one line per entry, index order)

Values use Python's shortest round-trip float repr. Every line, including
the last, ends with a single newline.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np

from transferlut.config import LUT_SIZE, MAX_CUBE_FILE_LINES
from transferlut.core.types import LookupTable
from transferlut.errors import ExportError, LUTFormatError

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """Natural decimal representation of a channel value."""
    return repr(float(value))


def write_cube_1d(filepath: str | Path, lut: LookupTable, title: str) -> Path:
    """Write a 1D LUT to a .cube file, creating or truncating it.

    The parent directory must already exist.

    Args:
        filepath: Destination path.
        lut: Table to serialize.
        title: Written verbatim after ``TITLE ``.

    Returns:
        The path written.

    Raises:
        ExportError: If the file cannot be created or written.
    """
    filepath = Path(filepath)
    try:
        with open(filepath, "w", encoding="utf-8", newline="\n") as f:
            f.write(f"TITLE {title}\n")
            f.write(f"LUT_1D_SIZE {lut.size}\n")
            for entry in lut:
                f.write(" ".join(format_value(v) for v in entry.as_tuple()))
                f.write("\n")
    except (OSError, UnicodeError) as exc:
        raise ExportError(f"Failed to write LUT to {filepath}: {exc}") from exc

    logger.debug("Wrote %d entries to %s", lut.size, filepath)
    return filepath


def _parse_title(raw: str) -> str:
    """Title text after ``TITLE ``, minus one pair of enclosing quotes."""
    value = raw.rstrip("\r\n").lstrip()[len("TITLE "):]
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value


def read_cube_1d(filepath: str | Path) -> tuple[LookupTable, dict]:
    """Read a 1D .cube file written by write_cube_1d.

    Blank lines and ``#`` comments are ignored.

    Args:
        filepath: Path to the .cube file.

    Returns:
        (lut, meta) where meta holds ``title`` (str or None) and ``size``.

    Raises:
        FileNotFoundError: If the file does not exist.
        LUTFormatError: If the file is malformed.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"LUT file not found: {filepath}")

    title = None
    size = None
    rows: list[list[float]] = []

    with open(filepath, "r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            if line_no > MAX_CUBE_FILE_LINES:
                raise LUTFormatError(
                    f"File exceeds {MAX_CUBE_FILE_LINES} lines"
                )
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if line.startswith("TITLE"):
                title = _parse_title(raw)
                continue
            if line.startswith("LUT_1D_SIZE"):
                parts = line.split()
                try:
                    size = int(parts[1])
                except (IndexError, ValueError) as exc:
                    raise LUTFormatError(f"Invalid LUT_1D_SIZE on line {line_no}") from exc
                if size != LUT_SIZE:
                    raise LUTFormatError(
                        f"LUT_1D_SIZE {size} out of range (only {LUT_SIZE} supported)"
                    )
                continue
            if line[0].isalpha() and not line.lower().startswith(("nan", "inf")):
                # Unrecognized keyword such as DOMAIN_MIN
                continue

            parts = line.split()
            if len(parts) != 3:
                raise LUTFormatError(
                    f"Expected 3 values on line {line_no}, got {len(parts)}"
                )
            try:
                values = [float(p) for p in parts]
            except ValueError as exc:
                raise LUTFormatError(f"Invalid number on line {line_no}") from exc
            if not all(math.isfinite(v) for v in values):
                raise LUTFormatError(f"Non-finite value on line {line_no}")
            rows.append(values)

    if size is None:
        raise LUTFormatError("No LUT_1D_SIZE found")
    if len(rows) != size:
        raise LUTFormatError(f"Expected {size} data lines, found {len(rows)}")

    lut = LookupTable(np.array(rows, dtype=np.float64))
    return lut, {"title": title, "size": size}
