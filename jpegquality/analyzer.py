"""
JPEG analyzer - quality figures and metadata for single files and folders.
"""
import hashlib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from natsort import natsorted
import logging

from jpegquality.core.errors import InvalidJPEGError, QuantizationTableError
from jpegquality.core.extensions import is_jpeg
from jpegquality.core.interfaces import EstimatorConfig, JpegSource
from jpegquality.core.tables import INVALID_QUALITY
from jpegquality.image.info import JpegInfo
from jpegquality.image.quality import QualityEstimator

logger = logging.getLogger(__name__)


def sha256_file(path: Path, chunk_size: int = 65536) -> str:
    """Calculate SHA256 hash of file."""
    hasher = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def read_quality(source: JpegSource, config: Optional[EstimatorConfig] = None) -> int:
    """
    Estimate the quality a JPEG was saved with.

    Returns:
        Quality in 1-100, or -1 if the source cannot be opened, is not a
        JPEG, or has no luminance table
    """
    estimator = QualityEstimator(config)
    try:
        return estimator.estimate_file(source).quality
    except (InvalidJPEGError, QuantizationTableError) as e:
        logger.debug(f"Not a usable JPEG: {e}")
    except OSError as e:
        logger.warning(f"Could not read {source}: {e}")
    return INVALID_QUALITY


def analyze_jpeg(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Analyze a JPEG file.

    Returns:
        Dict with file fields and quality estimates
    """
    path = Path(path)
    stat = path.stat()

    info = JpegInfo(path)
    info.load()

    table = info.luminance_table

    return {
        "filename": path.name,
        "sha256sum": sha256_file(path),
        "size": stat.st_size,
        "is_jpeg": info.is_jpeg,
        "width": info.width,
        "height": info.height,
        "mode": info.mode,
        "quality": info.quality,
        "scale_factor_quality": info.scale_factor_quality,
        "standard_quality": info.standard_quality,
        "precision": info.precision,
        "table_count": len(info.tables),
        "luminance_table": list(table.values) if table is not None else None,
    }


def get_jpegs(folder: Path, recursive: bool = False) -> List[Path]:
    """Get JPEG files from folder in natural sort order."""
    folder = Path(folder)
    if not folder.is_dir():
        raise ValueError(f"Not a directory: {folder}")

    pattern = "**/*" if recursive else "*"
    return natsorted(
        (p for p in folder.glob(pattern) if p.is_file() and is_jpeg(p)),
        key=lambda p: str(p),
    )


def analyze_folder(folder: Union[str, Path], recursive: bool = False) -> List[Dict[str, Any]]:
    """
    Analyze every JPEG in a folder.

    Returns:
        One dict per file, in natural filename order
    """
    images = get_jpegs(Path(folder), recursive)
    logger.info(f"Analyzing {len(images)} JPEG(s) in {folder}")

    results = []
    for image in images:
        try:
            results.append(analyze_jpeg(image))
        except OSError as e:
            logger.warning(f"Skipping {image}: {e}")
    return results
