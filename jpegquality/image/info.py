"""
JPEG information extraction.
"""
from pathlib import Path
from typing import Dict, Optional
import logging

from .quality import (
    estimate_quality,
    estimate_quality_scale_factor,
    match_standard_quality,
)
from .reader import JpegHeaderReader
from ..core.errors import InvalidJPEGError, QuantizationTableError
from ..core.interfaces import QuantizationTable
from ..core.tables import INVALID_QUALITY

logger = logging.getLogger(__name__)


class JpegInfo:
    """Extracts and provides JPEG metadata and quality estimates."""

    def __init__(self, input_path: Path, reader: Optional[JpegHeaderReader] = None):
        self.input_path = Path(input_path)
        self.reader = reader or JpegHeaderReader()
        self._loaded = False
        self._width = 0
        self._height = 0
        self._mode = ""
        self._tables: Dict[int, QuantizationTable] = {}
        self._quality = INVALID_QUALITY
        self._scale_factor_quality: Optional[int] = None
        self._standard_quality: Optional[int] = None

    def load(self) -> None:
        """Load JPEG metadata."""
        if self._loaded:
            return

        if not self.input_path.exists():
            raise ValueError(f"Image file does not exist: {self.input_path}")

        data = self.reader.read_bytes(self.input_path)
        try:
            with self.reader.open_header(data) as img:
                width, height = img.size
                mode = img.mode
            self._tables = self.reader.read_tables(data)
        except (InvalidJPEGError, QuantizationTableError) as e:
            logger.debug(f"Could not read quantization tables from {self.input_path}: {e}")
            self._tables = {}

        if self._tables:
            self._width, self._height = width, height
            self._mode = mode

        luminance = self._tables.get(JpegHeaderReader.LUMINANCE_INDEX)
        if luminance is not None:
            self._quality = estimate_quality(luminance)
            self._scale_factor_quality = estimate_quality_scale_factor(luminance)
            self._standard_quality = match_standard_quality(luminance)

        self._loaded = True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise RuntimeError("JpegInfo not loaded. Call load() first.")

    @property
    def is_jpeg(self) -> bool:
        self._ensure_loaded()
        return bool(self._tables)

    @property
    def width(self) -> int:
        self._ensure_loaded()
        return self._width

    @property
    def height(self) -> int:
        self._ensure_loaded()
        return self._height

    @property
    def mode(self) -> str:
        self._ensure_loaded()
        return self._mode

    @property
    def tables(self) -> Dict[int, QuantizationTable]:
        self._ensure_loaded()
        return dict(self._tables)

    @property
    def luminance_table(self) -> Optional[QuantizationTable]:
        self._ensure_loaded()
        return self._tables.get(JpegHeaderReader.LUMINANCE_INDEX)

    @property
    def precision(self) -> Optional[int]:
        table = self.luminance_table
        return table.precision if table is not None else None

    @property
    def quality(self) -> int:
        """
        Estimated JPEG quality (1-100) from the luminance table.

        Returns -1 for files that are not JPEGs or carry no luminance table.
        """
        self._ensure_loaded()
        return self._quality

    @property
    def scale_factor_quality(self) -> Optional[int]:
        """Quality from the mean scaling factor over the full table."""
        self._ensure_loaded()
        return self._scale_factor_quality

    @property
    def standard_quality(self) -> Optional[int]:
        """
        Quality of the exactly matching IJG baseline table.

        None when the encoder used custom tables.
        """
        self._ensure_loaded()
        return self._standard_quality
