"""
Abstract interfaces and data types for jpegquality components.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Sequence, Tuple, Union
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import QuantizationTableError
from .tables import TABLE_SIZE, MAX_BASELINE_VALUE

JpegSource = Union[str, Path, bytes, BinaryIO]


class EstimationMethod(Enum):
    """Algorithms available for turning a table into a quality figure."""
    IJG = "ijg"
    SCALE_FACTOR = "scale_factor"


@dataclass(frozen=True)
class QuantizationTable:
    """A 64-entry quantization table in natural order."""
    values: Tuple[int, ...]
    index: int = 0

    def __post_init__(self):
        values = tuple(int(v) for v in np.asarray(self.values).ravel())
        if len(values) != TABLE_SIZE:
            raise QuantizationTableError(
                f"Wrong size for quantization table: {len(values)} entries, expected {TABLE_SIZE}"
            )
        object.__setattr__(self, "values", values)

    @property
    def precision(self) -> int:
        return 16 if max(self.values) > MAX_BASELINE_VALUE else 8

    @property
    def is_luminance(self) -> bool:
        return self.index == 0

    def as_array(self) -> np.ndarray:
        return np.array(self.values, dtype=np.int64)

    def as_block(self) -> np.ndarray:
        """Table as an 8x8 block."""
        return self.as_array().reshape(8, 8)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, i):
        return self.values[i]


@dataclass
class EstimatorConfig:
    """Configuration for quality estimation."""
    method: EstimationMethod = EstimationMethod.IJG
    samples: Optional[int] = 3
    reference: Optional[Sequence[int]] = None

    def __post_init__(self):
        if isinstance(self.method, str):
            self.method = EstimationMethod(self.method)
        if self.reference is not None:
            self.reference = tuple(int(v) for v in np.asarray(self.reference).ravel())
        if self.samples is not None and self.samples < 1:
            raise ValueError(f"samples must be positive or None, got {self.samples}")


@dataclass
class QualityReport:
    """Quality estimate for one JPEG together with the table it came from."""
    path: Optional[Path]
    quality: int
    table: Optional[QuantizationTable] = None
    standard_quality: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.quality > 0

    @property
    def is_standard(self) -> bool:
        return self.standard_quality is not None


class IQuantizationTableReader(ABC):
    """Interface for extracting quantization tables from a JPEG stream."""

    @abstractmethod
    def read_tables(self, source: JpegSource) -> Dict[int, QuantizationTable]:
        """Read every quantization table, keyed by table index."""
        pass

    @abstractmethod
    def read_luminance(self, source: JpegSource) -> QuantizationTable:
        """Read the luminance (index 0) table."""
        pass


class IQualityEstimator(ABC):
    """Interface for quality estimation from a quantization table."""

    @abstractmethod
    def estimate(self, table: Union[QuantizationTable, Sequence[int], np.ndarray]) -> int:
        """Estimate quality (1-100) from a luminance table."""
        pass

    @abstractmethod
    def estimate_file(self, source: JpegSource) -> QualityReport:
        """Read the luminance table from a JPEG and estimate its quality."""
        pass
