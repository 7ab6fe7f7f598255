"""
Exceptions raised while reading JPEG headers and quantization tables.
"""


class InvalidJPEGError(ValueError):
    """Stream is not a JPEG: missing SOI signature or unparseable header."""


class QuantizationTableError(ValueError):
    """Quantization table is missing or has the wrong number of entries."""
