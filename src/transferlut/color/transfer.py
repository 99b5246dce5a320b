"""Scalar transfer functions for 8-bit video signal processing.

Every function maps one normalized float to one normalized float. Inputs
are not range-checked: out-of-range values follow the formulas as written.

Range conversion is intentionally asymmetric: ``cvt_full_8bit`` clamps at
both legal-range edges, ``cvt_limited_8bit`` does not clamp its output.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable

from transferlut.config import LEVEL_16_8BIT, LEVEL_219_8BIT, LEVEL_235_8BIT

TransferFunction = Callable[[float], float]

# sRGB (IEC 61966-2-1) decode parameters
SRGB_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# BT.709 OETF parameters
BT709_THRESHOLD = 0.018
BT709_LINEAR_SLOPE = 4.5
BT709_ALPHA = 1.099
BT709_BETA = 0.099
BT709_EXPONENT = 0.45


def remove_srgb(x: float) -> float:
    """sRGB EOTF: gamma-encoded sRGB value -> linear light."""
    if x < SRGB_THRESHOLD:
        return x / SRGB_LINEAR_SLOPE
    return ((x + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def add_bt709(x: float) -> float:
    """BT.709 OETF: linear light -> BT.709 gamma-encoded value."""
    if x < BT709_THRESHOLD:
        return BT709_LINEAR_SLOPE * x
    return BT709_ALPHA * x ** BT709_EXPONENT - BT709_BETA


def cvt_full_8bit(x: float) -> float:
    """Expand limited range [16, 235]/255 to full range [0, 1], clamped."""
    if x <= LEVEL_16_8BIT:
        return 0.0
    if x >= LEVEL_235_8BIT:
        return 1.0
    return (255.0 / 219.0) * (x - LEVEL_16_8BIT)


def cvt_limited_8bit(x: float) -> float:
    """Compress full range [0, 1] into limited range [16, 235]/255."""
    return LEVEL_219_8BIT * x + LEVEL_16_8BIT


def compose(*funcs: TransferFunction) -> TransferFunction:
    """Chain transfer functions left to right.

    ``compose(f, g)(x) == g(f(x))``. With no arguments the identity is
    returned.

    Args:
        *funcs: Single-argument numeric callables, applied in order.

    Returns:
        A single-argument callable.
    """
    if not funcs:
        return lambda x: x

    def composed(x: float) -> float:
        return reduce(lambda acc, f: f(acc), funcs, x)

    composed.__name__ = "_then_".join(getattr(f, "__name__", "f") for f in funcs)
    return composed


# sRGB decode followed by BT.709 encode
srgb_to_bt709 = compose(remove_srgb, add_bt709)
