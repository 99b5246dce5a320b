"""Core data types for transferlut.

CONVENTION:
    A 1D LUT is stored as a (LUT_SIZE, 3) float64 array indexed as
    lut[i, channel], where row i is the output for input i / (LUT_SIZE - 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from transferlut.config import LUT_SIZE
from transferlut.errors import LUTFormatError


@dataclass(frozen=True)
class Color:
    """Per-entry RGB payload of a LUT. Values are not clamped."""
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)


class LookupTable:
    """Fixed-size 1D lookup table of Color entries.

    Args:
        array: (LUT_SIZE, 3) array of channel values. Defaults to all zeros.

    Raises:
        LUTFormatError: If the array does not have shape (LUT_SIZE, 3).
    """

    def __init__(self, array: np.ndarray | None = None):
        if array is None:
            array = np.zeros((LUT_SIZE, 3), dtype=np.float64)
        array = np.asarray(array, dtype=np.float64)
        if array.shape != (LUT_SIZE, 3):
            raise LUTFormatError(
                f"Expected LUT of shape ({LUT_SIZE}, 3), got {array.shape}"
            )
        self._array = array

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the underlying (LUT_SIZE, 3) array."""
        view = self._array.view()
        view.flags.writeable = False
        return view

    @property
    def size(self) -> int:
        return LUT_SIZE

    def __len__(self) -> int:
        return LUT_SIZE

    def __getitem__(self, index: int) -> Color:
        r, g, b = self._array[index]
        return Color(float(r), float(g), float(b))

    def __iter__(self) -> Iterator[Color]:
        for i in range(LUT_SIZE):
            yield self[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LookupTable):
            return NotImplemented
        return bool(np.array_equal(self._array, other._array))

    def __repr__(self) -> str:
        return f"LookupTable(size={LUT_SIZE}, first={self[0]}, last={self[LUT_SIZE - 1]})"
