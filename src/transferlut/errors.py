"""Custom exception hierarchy for transferlut."""


class TransferLutError(Exception):
    """Base exception for all transferlut errors."""


class ExportError(TransferLutError):
    """Errors while creating or writing a LUT file."""


class LUTFormatError(ExportError):
    """Invalid LUT size or corrupted LUT file format."""
