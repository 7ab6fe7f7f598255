"""
JPEG quality estimation from the luminance quantization table.

The IJG estimator inverts libjpeg's quality scaling entry by entry and
averages the first few valid samples. Divisions run in single precision, as
libjpeg-based tools do, so each ceiling matches their output.
"""
from typing import Optional, Sequence, Union
import logging

import numpy as np

from ..core.errors import QuantizationTableError
from ..core.interfaces import (
    EstimationMethod,
    EstimatorConfig,
    IQualityEstimator,
    IQuantizationTableReader,
    JpegSource,
    QualityReport,
    QuantizationTable,
)
from ..core.tables import (
    MAX_QUANT_VALUE,
    NO_QUALITY,
    STD_LUMINANCE_QUANT_TBL,
    TABLE_SIZE,
    scale_table,
)
from .reader import JpegHeaderReader, source_path

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 3

TableLike = Union[QuantizationTable, Sequence[int], np.ndarray]


def _as_table(table: TableLike, name: str = "table") -> np.ndarray:
    if isinstance(table, QuantizationTable):
        return table.as_array()
    values = np.asarray(table, dtype=np.int64).ravel()
    if values.size != TABLE_SIZE:
        raise QuantizationTableError(
            f"Wrong size for {name}: {values.size} entries, expected {TABLE_SIZE}"
        )
    return values


def _as_reference(reference: TableLike) -> np.ndarray:
    base = _as_table(reference, "reference table")
    if np.any(base <= 0):
        raise QuantizationTableError("Reference table entries must be positive")
    return base


def linear_to_quality(linear):
    """
    Map IJG linear quality (scaling percentage) back to a 1-100 quality.

    Accepts a scalar or an integer array; returns the same shape.
    """
    lq = np.asarray(linear, dtype=np.int64)
    scalar = lq.ndim == 0
    lq = np.atleast_1d(lq)
    lq_f = lq.astype(np.float32)
    with np.errstate(divide="ignore"):
        high_scale = np.ceil(np.float32(5000) / lq_f)
    low_scale = 100 - np.ceil(lq_f / np.float32(2))
    quality = np.select(
        [lq == 1, lq == 100, lq > 100],
        [1, 100, high_scale],
        default=low_scale,
    ).astype(np.int64)
    if scalar:
        return int(quality[0])
    return quality


def estimate_quality(
    table: TableLike,
    reference: TableLike = STD_LUMINANCE_QUANT_TBL,
    samples: Optional[int] = DEFAULT_SAMPLES,
) -> int:
    """
    Estimate libjpeg quality from a luminance quantization table.

    Args:
        table: 64 quantization values, aligned with ``reference``
        reference: Quality-50 base table the encoder scaled
        samples: Number of valid entries to average, None for all of them

    Returns:
        Estimated quality in 1-100, or 0 when no entry is usable
    """
    values = _as_table(table)
    base = _as_reference(reference).astype(np.float32)

    accepted = np.flatnonzero((values > 0) & (values < MAX_QUANT_VALUE))
    if samples is not None:
        accepted = accepted[:samples]
    if accepted.size == 0:
        logger.debug("No usable quantization entries")
        return NO_QUALITY

    numerator = (values[accepted] * 100 - 50).astype(np.float32)
    linear = np.ceil(numerator / base[accepted]).astype(np.int64)
    qualities = linear_to_quality(linear)

    # tables with fewer valid entries than requested average what they have
    return int(qualities.sum()) // int(accepted.size)


def estimate_quality_scale_factor(
    table: TableLike,
    reference: TableLike = STD_LUMINANCE_QUANT_TBL,
) -> int:
    """
    Estimate quality from the mean scaling factor over the whole table.

    This is the jhead approach: average ``100 * value / reference`` over
    all 64 entries and invert the IJG scaling once.
    """
    values = _as_table(table)
    base = _as_reference(reference)

    if np.all(values == 1):
        return 100

    scales = 100.0 * values / base
    mean_scale = float(np.mean(scales))

    if mean_scale <= 100:
        quality = (200.0 - mean_scale) / 2.0
    else:
        quality = 5000.0 / mean_scale

    return int(np.clip(int(quality + 0.5), 1, 100))


def match_standard_quality(
    table: TableLike,
    reference: TableLike = STD_LUMINANCE_QUANT_TBL,
) -> Optional[int]:
    """
    Find the quality whose baseline IJG table equals ``table`` exactly.

    Returns None for custom tables (camera firmware, optimized encoders).
    """
    values = _as_table(table)
    base = _as_reference(reference)
    for quality in range(1, 101):
        if np.array_equal(scale_table(quality, base), values):
            return quality
    return None


class QualityEstimator(IQualityEstimator):
    """
    Estimates JPEG quality using a configurable method.

    Example:
        estimator = QualityEstimator()
        quality = estimator.estimate(table)

        report = estimator.estimate_file(Path("photo.jpg"))
        print(report.quality)
    """

    def __init__(
        self,
        config: Optional[EstimatorConfig] = None,
        reader: Optional[IQuantizationTableReader] = None,
    ):
        self.config = config or EstimatorConfig()
        self._reference = (
            STD_LUMINANCE_QUANT_TBL
            if self.config.reference is None
            else _as_reference(self.config.reference)
        )
        self.reader = reader or JpegHeaderReader()

    @property
    def reference(self) -> np.ndarray:
        return self._reference

    def estimate(self, table: TableLike) -> int:
        """Estimate quality (1-100) from a luminance table."""
        if self.config.method is EstimationMethod.SCALE_FACTOR:
            return estimate_quality_scale_factor(table, self._reference)
        return estimate_quality(table, self._reference, self.config.samples)

    def estimate_file(self, source: JpegSource) -> QualityReport:
        """
        Read the luminance table from a JPEG and estimate its quality.

        Raises:
            InvalidJPEGError: If the source is not a JPEG
            QuantizationTableError: If no usable luminance table is present
        """
        table = self.reader.read_luminance(source)
        quality = self.estimate(table)
        path = source_path(source)
        report = QualityReport(
            path=path,
            quality=quality,
            table=table,
            standard_quality=match_standard_quality(table, self._reference),
        )
        logger.debug(f"Estimated quality {quality} for {path or '<bytes>'}")
        return report
