"""
Reference quantization tables and the IJG quality scaling.

Tables are stored in natural (row-major) order, matching what libjpeg keeps
in ``quantval`` and what Pillow exposes through ``Image.quantization``.
"""
import numpy as np

TABLE_SIZE = 64  # one 8x8 DCT block
MAX_QUANT_VALUE = 32767
MAX_BASELINE_VALUE = 255

INVALID_QUALITY = -1
NO_QUALITY = 0

# IJG / JPEG Annex K baseline luminance table (quality 50)
STD_LUMINANCE_QUANT_TBL = np.array([
    16, 11, 10, 16, 24, 40, 51, 61,
    12, 12, 14, 19, 26, 58, 60, 55,
    14, 13, 16, 24, 40, 57, 69, 56,
    14, 17, 22, 29, 51, 87, 80, 62,
    18, 22, 37, 56, 68, 109, 103, 77,
    24, 35, 55, 64, 81, 104, 113, 92,
    49, 64, 78, 87, 103, 121, 120, 101,
    72, 92, 95, 98, 112, 100, 103, 99,
], dtype=np.int64)
STD_LUMINANCE_QUANT_TBL.flags.writeable = False


def quality_scaling(quality: int) -> int:
    """Convert a 1-100 quality into the IJG percentage scaling factor."""
    quality = min(max(int(quality), 1), 100)
    if quality < 50:
        return 5000 // quality
    return 200 - quality * 2


def scale_table(
    quality: int,
    reference: np.ndarray = STD_LUMINANCE_QUANT_TBL,
    force_baseline: bool = True,
) -> np.ndarray:
    """
    Build the quantization table libjpeg would write for ``quality``.

    Args:
        quality: Requested quality, clamped to 1-100
        reference: Base table scaled by the quality factor
        force_baseline: Limit values to 8 bits like ``jpeg_set_quality``

    Returns:
        64-entry int64 array in the same order as ``reference``
    """
    scale = quality_scaling(quality)
    base = np.asarray(reference, dtype=np.int64).ravel()
    table = (base * scale + 50) // 100
    upper = MAX_BASELINE_VALUE if force_baseline else MAX_QUANT_VALUE
    return np.clip(table, 1, upper)
