"""
Example: JPEG quality estimation with jpegquality

This example demonstrates how to:
- Read the estimated quality of single files
- Analyze every JPEG in a folder
- Compare the IJG and scale-factor estimators
"""
import logging
from pathlib import Path
from jpegquality import (
    EstimatorConfig,
    analyze_folder,
    read_quality,
)


def report_file(path: Path):
    """Print both estimates for a single file."""
    quality = read_quality(path)
    if quality < 0:
        print(f"{path}: not a JPEG")
        return

    scale_factor = read_quality(path, EstimatorConfig(method="scale_factor"))
    print(f"{path}: quality {quality} (scale factor estimate {scale_factor})")


def report_folder(folder: Path):
    """Print a summary line per JPEG in the folder."""
    for entry in analyze_folder(folder, recursive=True):
        standard = entry["standard_quality"]
        match = f"IJG table q{standard}" if standard else "custom table"
        print(f"{entry['filename']}: quality {entry['quality']} - {entry['width']}x{entry['height']} - {match}")


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if len(sys.argv) < 2:
        print("Usage: python read_quality.py <file_or_folder> [...]")
        sys.exit(1)

    for arg in sys.argv[1:]:
        target = Path(arg)
        if not target.exists():
            print(f"Not found: {target}")
            continue
        if target.is_dir():
            report_folder(target)
        else:
            report_file(target)
