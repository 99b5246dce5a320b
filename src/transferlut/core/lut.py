"""1D LUT sampling.

Sampling convention: entry i holds f(i / (LUT_SIZE - 1)), so entry 0 is
f(0.0) and the last entry is f(1.0) exactly.
"""

from __future__ import annotations

import logging

import numpy as np

from transferlut.color.transfer import TransferFunction
from transferlut.config import LUT_SIZE
from transferlut.core.types import LookupTable

logger = logging.getLogger(__name__)


def sample_points() -> np.ndarray:
    """Uniform input samples i / (LUT_SIZE - 1) for i in [0, LUT_SIZE).

    Returns:
        (LUT_SIZE,) float64 array, first element 0.0, last element 1.0.
    """
    return np.arange(LUT_SIZE, dtype=np.float64) / float(LUT_SIZE - 1)


def generate(function: TransferFunction) -> LookupTable:
    """Sample a scalar transfer function into a 1D LUT.

    The function is evaluated once per entry on a Python float and the
    result is replicated across the red, green and blue channels.

    Args:
        function: Callable mapping one float to one float.

    Returns:
        Fully populated LookupTable.
    """
    name = getattr(function, "__name__", repr(function))
    logger.debug("Sampling %s at %d points", name, LUT_SIZE)

    values = np.empty(LUT_SIZE, dtype=np.float64)
    for i, base in enumerate(sample_points()):
        values[i] = function(float(base))

    return LookupTable(np.stack([values, values, values], axis=-1))
