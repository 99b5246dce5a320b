"""Shared fixtures for transferlut tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def output_dir(tmp_path):
    """Existing output directory for generated LUTs."""
    d = tmp_path / "output"
    d.mkdir()
    return d


@pytest.fixture
def tmp_cube_path(tmp_path):
    """Temporary .cube output path."""
    return tmp_path / "test_output.cube"


@pytest.fixture
def unit_samples():
    """Dense float64 samples over [0, 1]."""
    return np.linspace(0.0, 1.0, 1001)
