"""
Tests for JPEG header reading.
"""
import io

import pytest
from PIL import Image

from jpegquality import (
    InvalidJPEGError,
    JpegHeaderReader,
    QuantizationTable,
    scale_table,
)


class TestJpegHeaderReader:
    """Tests for JpegHeaderReader class."""

    def test_read_luminance(self, sample_jpeg):
        table = JpegHeaderReader().read_luminance(sample_jpeg)

        assert isinstance(table, QuantizationTable)
        assert table.index == 0
        assert list(table.values) == scale_table(73).tolist()

    def test_read_tables_color(self, sample_jpeg):
        tables = JpegHeaderReader().read_tables(sample_jpeg)

        assert set(tables) == {0, 1}
        assert tables[1].is_luminance is False

    def test_read_tables_grayscale(self, make_jpeg):
        path = make_jpeg("gray.jpg", quality=90, mode="L")
        tables = JpegHeaderReader().read_tables(path)

        assert set(tables) == {0}
        assert tables[0].precision == 8

    def test_read_from_str_path(self, sample_jpeg):
        table = JpegHeaderReader().read_luminance(str(sample_jpeg))
        assert table[0] == 9

    def test_read_from_bytes(self, sample_jpeg):
        table = JpegHeaderReader().read_luminance(sample_jpeg.read_bytes())
        assert table[:3] == (9, 6, 5)

    def test_read_from_stream(self, sample_jpeg):
        stream = io.BytesIO(sample_jpeg.read_bytes())
        stream.read(10)

        table = JpegHeaderReader().read_luminance(stream)

        assert table[:3] == (9, 6, 5)

    def test_png_is_rejected(self, png_image):
        with pytest.raises(InvalidJPEGError):
            JpegHeaderReader().read_tables(png_image)

    def test_signature_only_is_rejected(self):
        with pytest.raises(InvalidJPEGError):
            JpegHeaderReader().read_tables(b"\xff\xd8")

    def test_empty_is_rejected(self):
        with pytest.raises(InvalidJPEGError):
            JpegHeaderReader().read_tables(b"")

    def test_garbage_after_signature_is_rejected(self):
        with pytest.raises(InvalidJPEGError):
            JpegHeaderReader().read_tables(b"\xff\xd8" + b"\x00" * 64)

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            JpegHeaderReader().read_tables(temp_dir / "missing.jpg")

    def test_read_from_unseekable_stream(self, sample_jpeg):
        stream = UnseekableStream(sample_jpeg.read_bytes())

        table = JpegHeaderReader().read_luminance(stream)

        assert table[:3] == (9, 6, 5)

    def test_multi_picture_jpeg(self, mpo_jpeg):
        with Image.open(mpo_jpeg) as img:
            assert img.format == "MPO"

        table = JpegHeaderReader().read_luminance(mpo_jpeg)

        assert list(table.values) == scale_table(73).tolist()

    def test_oversized_dimensions(self, oversized_jpeg):
        reader = JpegHeaderReader()
        with reader.open_header(oversized_jpeg.read_bytes()) as img:
            assert img.size == (15000, 15000)

        table = reader.read_luminance(oversized_jpeg)

        assert table[:3] == (9, 6, 5)


class UnseekableStream(io.BytesIO):
    """Binary stream that behaves like a pipe."""

    def seekable(self):
        return False

    def seek(self, *args):
        raise io.UnsupportedOperation("seek")
