"""transferlut: 1D transfer-curve LUT generation for video pipelines."""

__version__ = "0.1.0"
