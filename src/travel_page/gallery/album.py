"""Build one trip album from a directory of images."""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from travel_page.gallery.metadata import extract_metadata
from travel_page.gallery.models import ImageEntry, NormalizedMetadata, Trip
from travel_page.gallery.trip_name import format_trip_name

logger = logging.getLogger(__name__)

# Supported image formats
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

MetadataReader = Callable[[Path], NormalizedMetadata]


def is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def list_image_files(dir_path: Union[str, Path]) -> List[str]:
    """Return the image file names in a directory, sorted.

    Raises:
        OSError: If the directory cannot be listed.
    """
    directory = Path(dir_path)
    return sorted(entry.name for entry in directory.iterdir() if is_image_file(entry))


def build_trip(
    dir_path: Union[str, Path],
    dir_name: str,
    metadata_reader: MetadataReader = extract_metadata,
) -> Optional[Trip]:
    """Assemble the trip for one directory.

    Args:
        dir_path: Path of the trip directory.
        dir_name: Directory name, used as the trip id.
        metadata_reader: Callable returning normalized metadata for a file.

    Returns:
        Trip with its images in file name order, or None when the
        directory is unreadable or holds no images.
    """
    directory = Path(dir_path)
    try:
        filenames = list_image_files(directory)
    except OSError as e:
        logger.error(f"Error reading directory {directory}: {e}")
        return None

    if not filenames:
        return None

    name = format_trip_name(dir_name)
    images = tuple(
        ImageEntry(
            filename=filename,
            relative_path=f"{dir_name}/{filename}",
            alt=f"{name} - {filename}",
            metadata=metadata_reader(directory / filename),
        )
        for filename in filenames
    )
    return Trip(dir_name=dir_name, name=name, images=images)
