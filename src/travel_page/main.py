"""Build the travel page from the trip directories."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from travel_page.config import BuildConfig, get_default_config
from travel_page.gallery.album import build_trip
from travel_page.gallery.models import Trip
from travel_page.gallery.page import assemble_page

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BuildError(RuntimeError):
    """The build cannot produce a page; nothing was written."""


@dataclass(frozen=True)
class BuildResult:
    output_file: Path
    trips: Tuple[Trip, ...]


def discover_trip_dirs(root: Path) -> List[str]:
    """Return the names of the immediate subdirectories of root, sorted."""
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir())


def collect_trips(root: Path, dir_names: List[str]) -> List[Trip]:
    """Build a trip per directory, skipping directories without images."""
    trips = []
    for dir_name in dir_names:
        trip = build_trip(root / dir_name, dir_name)
        if trip is None:
            logger.warning(f"Skipping {dir_name}: no trip built")
            continue
        logger.info(f"Found {trip.photo_count} images in {dir_name}")
        trips.append(trip)
    return trips


def build_travel_page(config: Optional[BuildConfig] = None) -> BuildResult:
    """Scan the trip directories and write the rendered page.

    Args:
        config: Build configuration. Defaults to the fixed site layout.

    Returns:
        BuildResult with the output path and the rendered trips.

    Raises:
        BuildError: If the travel directory or template is missing or the
            template cannot be read. No output is written.
        OSError: If the output file cannot be written.
    """
    config = config or get_default_config()

    if not config.travel_dir.is_dir():
        raise BuildError(f"Travel directory not found: {config.travel_dir}")
    if not config.template_file.exists():
        raise BuildError(f"Template file not found: {config.template_file}")

    dir_names = discover_trip_dirs(config.travel_dir)
    logger.info(f"Found {len(dir_names)} trip directories: {dir_names}")

    trips = collect_trips(config.travel_dir, dir_names)

    page = assemble_page(trips, config.template_file, config.image_url_prefix, config.marker)
    if page is None:
        raise BuildError(f"Failed to generate travel page from {config.template_file}")

    config.output_file.write_text(page, encoding="utf-8")
    logger.info(f"Generated {config.output_file} with {len(trips)} trip sections")
    return BuildResult(output_file=config.output_file, trips=tuple(trips))


def run(config: Optional[BuildConfig] = None, level: int = logging.INFO) -> int:
    """Main application entry point.

    Args:
        config: Build configuration. Defaults to the fixed site layout.
        level: Logging level for the progress output.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)

    logger.info("Generating travel page...")
    try:
        build_travel_page(config)
    except (BuildError, OSError) as e:
        logger.error(f"Failed to generate travel page: {e}")
        return 1

    logger.info("Travel page generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(run())
