"""
JPEG header reading and quality estimation for jpegquality.
"""
from .reader import JpegHeaderReader
from .quality import (
    QualityEstimator,
    estimate_quality,
    estimate_quality_scale_factor,
    linear_to_quality,
    match_standard_quality,
)
from .info import JpegInfo

__all__ = [
    'JpegHeaderReader',
    'QualityEstimator',
    'estimate_quality',
    'estimate_quality_scale_factor',
    'linear_to_quality',
    'match_standard_quality',
    'JpegInfo',
]
