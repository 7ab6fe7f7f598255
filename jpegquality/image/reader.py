"""
JPEG header reading.

Only the signature check is done by hand; segment parsing is left to Pillow,
which exposes the DQT tables in natural order through ``quantization``.
"""
import io
from pathlib import Path
from typing import Dict, Optional
from PIL import JpegImagePlugin
import logging

from ..core.errors import InvalidJPEGError, QuantizationTableError
from ..core.extensions import has_jpeg_signature
from ..core.interfaces import IQuantizationTableReader, JpegSource, QuantizationTable

logger = logging.getLogger(__name__)


def source_path(source: JpegSource) -> Optional[Path]:
    """Best-effort filesystem path of a source, None for in-memory data."""
    if isinstance(source, (str, Path)):
        return Path(source)
    name = getattr(source, "name", None)
    if isinstance(name, (str, Path)):
        return Path(name)
    return None


class JpegHeaderReader(IQuantizationTableReader):
    """Reads quantization tables from JPEG files, bytes or binary streams."""

    LUMINANCE_INDEX = 0

    def read_bytes(self, source: JpegSource) -> bytes:
        """Load the raw stream; files are opened and closed here."""
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)
        if isinstance(source, (str, Path)):
            with open(source, "rb") as f:
                return f.read()
        if hasattr(source, "seekable") and source.seekable():
            source.seek(0)
        return source.read()

    def open_header(self, data: bytes) -> JpegImagePlugin.JpegImageFile:
        """
        Parse the JPEG header without decoding pixel data.

        The plugin class is used directly so multi-picture (MPO) files are
        read as their first JPEG frame and no pixel-count limit applies.

        Raises:
            InvalidJPEGError: If the stream lacks the SOI marker or cannot be parsed
        """
        if not has_jpeg_signature(data):
            raise InvalidJPEGError("Invalid JPEG content: missing SOI marker")
        try:
            return JpegImagePlugin.JpegImageFile(io.BytesIO(data))
        except (OSError, SyntaxError) as e:
            raise InvalidJPEGError(f"Could not parse JPEG header: {e}") from e

    def read_tables(self, source: JpegSource) -> Dict[int, QuantizationTable]:
        """
        Read every quantization table from a JPEG.

        Raises:
            InvalidJPEGError: If the stream lacks the SOI marker or cannot be parsed
            QuantizationTableError: If a table does not hold 64 entries
        """
        name = source_path(source) or '<stream>'
        data = self.read_bytes(source)
        with self.open_header(data) as img:
            quantization = dict(getattr(img, "quantization", None) or {})

        tables = {
            index: QuantizationTable(tuple(values), index)
            for index, values in quantization.items()
        }
        logger.debug(f"Read {len(tables)} quantization table(s) from {name}")
        return tables

    def read_luminance(self, source: JpegSource) -> QuantizationTable:
        """Read the luminance table (index 0)."""
        tables = self.read_tables(source)
        table = tables.get(self.LUMINANCE_INDEX)
        if table is None:
            raise QuantizationTableError("No luminance quantization table found")
        return table
