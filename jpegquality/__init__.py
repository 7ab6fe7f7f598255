"""
jpegquality - Estimate the quality factor a JPEG was saved with.

The estimate inverts libjpeg's quality scaling on the luminance
quantization table stored in the file header, so no pixel data is decoded.

Example usage:
    from jpegquality import read_quality, estimate_quality

    quality = read_quality("photo.jpg")   # -1 if not a JPEG
    print(f"Saved at quality {quality}")

    # Work on a table directly
    quality = estimate_quality(table)

    # Full report for a folder
    from jpegquality import analyze_folder

    for entry in analyze_folder("photos"):
        print(entry["filename"], entry["quality"])
"""

from .core.interfaces import (
    EstimationMethod,
    QuantizationTable,
    EstimatorConfig,
    QualityReport,
)
from .core.errors import InvalidJPEGError, QuantizationTableError
from .core.tables import (
    STD_LUMINANCE_QUANT_TBL,
    INVALID_QUALITY,
    NO_QUALITY,
    quality_scaling,
    scale_table,
)
from .core.extensions import JPEG_EXTENSIONS, is_jpeg, has_jpeg_signature
from .image import (
    JpegHeaderReader,
    QualityEstimator,
    JpegInfo,
    estimate_quality,
    estimate_quality_scale_factor,
    linear_to_quality,
    match_standard_quality,
)
from .analyzer import read_quality, analyze_jpeg, analyze_folder, get_jpegs, sha256_file

__version__ = "1.0.0"

__all__ = [
    # Core types
    "EstimationMethod",
    "QuantizationTable",
    "EstimatorConfig",
    "QualityReport",

    # Errors
    "InvalidJPEGError",
    "QuantizationTableError",

    # Tables
    "STD_LUMINANCE_QUANT_TBL",
    "INVALID_QUALITY",
    "NO_QUALITY",
    "quality_scaling",
    "scale_table",

    # Estimation
    "QualityEstimator",
    "estimate_quality",
    "estimate_quality_scale_factor",
    "linear_to_quality",
    "match_standard_quality",

    # Reading
    "JpegHeaderReader",
    "JpegInfo",

    # Analyzer
    "read_quality",
    "analyze_jpeg",
    "analyze_folder",
    "get_jpegs",
    "sha256_file",

    # Extensions
    "JPEG_EXTENSIONS",
    "is_jpeg",
    "has_jpeg_signature",
]
