"""Data models for trips, images and their normalized metadata."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

UNKNOWN_DATE = "Unknown date"
UNKNOWN_CAMERA = "Unknown camera"

MAP_URL = "https://maps.google.com/?q={lat},{lng}"


@dataclass(frozen=True)
class Location:
    """GPS position in decimal degrees."""
    lat: float
    lng: float

    @property
    def map_url(self) -> str:
        """Link that opens the position in a map viewer."""
        return MAP_URL.format(lat=self.lat, lng=self.lng)


@dataclass(frozen=True)
class NormalizedMetadata:
    """Display-ready metadata for one image, always fully populated."""
    date: str = UNKNOWN_DATE
    camera: str = UNKNOWN_CAMERA
    location: Optional[Location] = None
    description: Optional[str] = None


FALLBACK_METADATA = NormalizedMetadata()


@dataclass(frozen=True)
class ImageEntry:
    """One image inside a trip directory."""
    filename: str
    relative_path: str  # "<trip dir>/<filename>"
    alt: str
    metadata: NormalizedMetadata = field(default=FALLBACK_METADATA)


@dataclass(frozen=True)
class Trip:
    """One album, rendered as one page section."""
    dir_name: str
    name: str
    images: Tuple[ImageEntry, ...]

    @property
    def anchor_id(self) -> str:
        return self.dir_name

    @property
    def photo_count(self) -> int:
        return len(self.images)
