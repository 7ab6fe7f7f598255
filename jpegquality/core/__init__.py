"""
Core module - Interfaces, data types, tables and errors for jpegquality.
"""
from .interfaces import (
    # Enums
    EstimationMethod,

    # Data classes
    QuantizationTable,
    EstimatorConfig,
    QualityReport,

    # Abstract interfaces
    IQuantizationTableReader,
    IQualityEstimator,
)
from .errors import InvalidJPEGError, QuantizationTableError
from .tables import (
    TABLE_SIZE,
    MAX_QUANT_VALUE,
    INVALID_QUALITY,
    NO_QUALITY,
    STD_LUMINANCE_QUANT_TBL,
    quality_scaling,
    scale_table,
)

__all__ = [
    # Enums
    "EstimationMethod",

    # Data classes
    "QuantizationTable",
    "EstimatorConfig",
    "QualityReport",

    # Abstract interfaces
    "IQuantizationTableReader",
    "IQualityEstimator",

    # Errors
    "InvalidJPEGError",
    "QuantizationTableError",

    # Tables
    "TABLE_SIZE",
    "MAX_QUANT_VALUE",
    "INVALID_QUALITY",
    "NO_QUALITY",
    "STD_LUMINANCE_QUANT_TBL",
    "quality_scaling",
    "scale_table",
]
