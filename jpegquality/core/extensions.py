"""
JPEG file extensions and signature checks.
"""
SOI_MARKER = b"\xff\xd8"

JPEG_EXTENSIONS = {'.jpg', '.jpeg', '.jpe', '.jfif'}


def is_jpeg(path) -> bool:
    """Check if path has a JPEG file extension."""
    from pathlib import Path
    return Path(path).suffix.lower() in JPEG_EXTENSIONS


def has_jpeg_signature(data: bytes) -> bool:
    """Check for the start-of-image marker on a stream longer than the marker itself."""
    return len(data) > len(SOI_MARKER) and data[:2] == SOI_MARKER
