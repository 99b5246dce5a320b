"""LUT save operations and the fixed set of generated tables.

Each save is independent: it samples its own table, owns its own file
handle, and writes exactly one file. generate_all stops at the first
failure and leaves later presets unwritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from transferlut.color.transfer import (
    TransferFunction,
    cvt_full_8bit,
    cvt_limited_8bit,
    srgb_to_bt709,
)
from transferlut.config import DEFAULT_OUTPUT_DIR
from transferlut.core.lut import generate
from transferlut.io.cube import write_cube_1d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LutPreset:
    """A named table to generate."""
    filename: str
    title: str
    function: TransferFunction


PRESETS: tuple[LutPreset, ...] = (
    LutPreset(
        "sRGB_BT709_gammacorr_8bit.cube",
        "sRGB to BT.709 gamma correction (8-bit)",
        srgb_to_bt709,
    ),
    LutPreset(
        "limited_to_full_8bit.cube",
        "RGB limited range to full range (8-bit)",
        cvt_full_8bit,
    ),
    LutPreset(
        "full_to_limited_8bit.cube",
        "RGB full range to limited range (8-bit)",
        cvt_limited_8bit,
    ),
)


def save_lut(
    filename: str,
    title: str,
    function: TransferFunction,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
) -> Path:
    """Generate a LUT from ``function`` and write it to ``output_dir/filename``.

    The output directory is not created. An existing file is overwritten.

    Raises:
        ExportError: If the file cannot be created or written.
    """
    path = Path(output_dir) / filename
    lut = generate(function)
    write_cube_1d(path, lut, title)
    logger.info("Saved '%s' to %s", title, path)
    return path


def generate_all(
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    presets: Sequence[LutPreset] = PRESETS,
) -> list[Path]:
    """Save every preset in order. The first failure propagates.

    Returns:
        Paths written, in preset order.
    """
    written = []
    for preset in presets:
        written.append(save_lut(preset.filename, preset.title, preset.function, output_dir))
    return written
