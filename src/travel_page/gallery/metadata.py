"""Normalize raw image metadata into display-ready values."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from travel_page.gallery.exif import RawMetadata, read_exif
from travel_page.gallery.models import (
    FALLBACK_METADATA,
    UNKNOWN_CAMERA,
    UNKNOWN_DATE,
    Location,
    NormalizedMetadata,
)
from travel_page.gallery.trip_name import MONTH_NAMES

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

# Tag precedence, first present value wins.
DATE_TAGS = ("DateTimeOriginal", "DateTime")
DESCRIPTION_TAGS = ("ImageDescription", "UserComment")

EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"

MetadataDecoder = Callable[[Union[str, Path]], Optional[RawMetadata]]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an EXIF or ISO 8601 timestamp; None if it cannot be parsed."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        # "2023:07:15 14:30:00", possibly followed by sub-seconds or an offset
        return datetime.strptime(text[:19], EXIF_DATE_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_timestamp(value: datetime) -> str:
    """Format as e.g. "Saturday, July 15, 2023, 02:30 PM" (en-US)."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{WEEKDAY_NAMES[value.weekday()]}, {MONTH_NAMES[value.month - 1]} "
        f"{value.day}, {value.year}, {hour:02d}:{value.minute:02d} {meridiem}"
    )


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coordinate(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def normalize_date(raw: RawMetadata) -> str:
    for tag in DATE_TAGS:
        if tag not in raw:
            continue
        parsed = parse_timestamp(raw[tag])
        if parsed is not None:
            return format_timestamp(parsed)
        logger.debug(f"Unparseable {tag}: {raw[tag]!r}")
    return UNKNOWN_DATE


def normalize_camera(raw: RawMetadata) -> str:
    make = _text(raw.get("Make"))
    model = _text(raw.get("Model"))
    if make and model:
        return f"{make} {model}"
    return make or model or UNKNOWN_CAMERA


def normalize_location(raw: RawMetadata) -> Optional[Location]:
    lat = _coordinate(raw.get("latitude"))
    lng = _coordinate(raw.get("longitude"))
    if lat is None or lng is None:
        return None
    return Location(lat=lat, lng=lng)


def normalize_description(raw: RawMetadata) -> Optional[str]:
    for tag in DESCRIPTION_TAGS:
        text = _text(raw.get(tag))
        if text:
            return text
    return None


def normalize_metadata(raw: Optional[RawMetadata]) -> NormalizedMetadata:
    """Build a fully populated metadata record from a raw decoder record.

    Total over its input: missing or malformed fields fall back to
    "Unknown date", "Unknown camera" and absent location/description.

    Args:
        raw: Tag-name keyed record from the decoder, or None.

    Returns:
        NormalizedMetadata instance.
    """
    if not raw:
        return FALLBACK_METADATA
    return NormalizedMetadata(
        date=normalize_date(raw),
        camera=normalize_camera(raw),
        location=normalize_location(raw),
        description=normalize_description(raw),
    )


def extract_metadata(
    image_path: Union[str, Path],
    decoder: MetadataDecoder = read_exif,
) -> NormalizedMetadata:
    """Decode and normalize the metadata of one image file.

    Decoder errors are logged and degrade to the fallback record; this
    function never raises for unreadable or corrupt images.
    """
    try:
        raw = decoder(image_path)
    except Exception as e:
        logger.warning(f"Error reading EXIF data from {image_path}: {e}")
        return FALLBACK_METADATA
    return normalize_metadata(raw)
