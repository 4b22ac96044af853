"""Resize, re-orient and strip source photos in place before a build."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple, Union

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

JPEG_EXTENSIONS = {".jpg", ".jpeg"}
MAX_SIZE: Tuple[int, int] = (1920, 1080)
JPEG_QUALITY = 85


@dataclass
class PreprocessStats:
    processed: int = 0
    skipped: int = 0
    errors: int = 0


def iter_trip_photos(root: Union[str, Path]) -> Iterator[Path]:
    """Yield the JPEG files one level below each trip directory, sorted."""
    for trip_dir in sorted(p for p in Path(root).iterdir() if p.is_dir()):
        for entry in sorted(trip_dir.iterdir()):
            if entry.is_file() and entry.suffix.lower() in JPEG_EXTENSIONS:
                yield entry


def preprocess_image(
    path: Path,
    max_size: Tuple[int, int] = MAX_SIZE,
    quality: int = JPEG_QUALITY,
) -> None:
    """Apply EXIF orientation, shrink to fit max_size and save without metadata."""
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        if img.mode not in ("RGB", "L"):
            img = img.convert("RGB")
        # thumbnail() never enlarges
        img.thumbnail(max_size, Image.LANCZOS)
        img.save(path, "JPEG", quality=quality)


def preprocess_photos(
    root: Union[str, Path],
    max_size: Tuple[int, int] = MAX_SIZE,
    quality: int = JPEG_QUALITY,
) -> PreprocessStats:
    """Preprocess every trip photo under root. Per-file failures are counted, not raised."""
    stats = PreprocessStats()
    for path in iter_trip_photos(root):
        logger.info(f"Processing: {path}")
        try:
            preprocess_image(path, max_size, quality)
            stats.processed += 1
        except UnidentifiedImageError:
            logger.warning(f"Not a valid image file: {path}")
            stats.skipped += 1
        except OSError as e:
            logger.error(f"Failed to process {path}: {e}")
            stats.errors += 1
    return stats
