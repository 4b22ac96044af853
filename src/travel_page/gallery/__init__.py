"""Trip discovery, metadata extraction and page rendering."""

from .album import IMAGE_EXTENSIONS, build_trip, list_image_files
from .metadata import extract_metadata, normalize_metadata
from .models import FALLBACK_METADATA, ImageEntry, Location, NormalizedMetadata, Trip
from .page import CONTENT_MARKER, NO_TRIPS_PLACEHOLDER, assemble_page, render_trip
from .trip_name import format_trip_name

__all__ = [
    "IMAGE_EXTENSIONS",
    "CONTENT_MARKER",
    "NO_TRIPS_PLACEHOLDER",
    "FALLBACK_METADATA",
    "ImageEntry",
    "Location",
    "NormalizedMetadata",
    "Trip",
    "assemble_page",
    "build_trip",
    "extract_metadata",
    "format_trip_name",
    "list_image_files",
    "normalize_metadata",
    "render_trip",
]
