"""Read embedded image metadata with Pillow.

The decoder returns a flat dictionary keyed by EXIF tag name (``Make``,
``DateTimeOriginal``, ``UserComment`` ...). Tags from the base IFD, the
Exif sub-IFD and the GPS IFD are merged, values
are translated to plain Python types and GPS coordinates are added as
decimal ``latitude`` / ``longitude``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from PIL import Image
from PIL.ExifTags import GPS, GPSTAGS, IFD, TAGS

logger = logging.getLogger(__name__)

RawMetadata = Dict[str, Any]

# UserComment starts with an 8 byte character code (EXIF 2.3, 4.6.5).
# UNICODE comments carry no BOM and follow the TIFF header byte order.
_UNICODE_PREFIX = b"UNICODE\x00"
_UTF16_BY_ENDIAN = {"<": "utf-16-le", ">": "utf-16-be"}
_COMMENT_ENCODINGS = {
    b"ASCII\x00\x00\x00": "ascii",
    b"JIS\x00\x00\x00\x00\x00": "shift_jis",
    b"\x00\x00\x00\x00\x00\x00\x00\x00": "utf-8",
}


def rational_to_float(value: Any) -> Optional[float]:
    """IFDRational, (num, den) tuple or plain number -> float."""
    if value is None:
        return None
    try:
        if hasattr(value, "numerator") and hasattr(value, "denominator"):
            num, den = value.numerator, value.denominator
        elif isinstance(value, (tuple, list)) and len(value) == 2:
            num, den = value
        else:
            return float(value)
        return float(num) / float(den) if den else None
    except (TypeError, ValueError, ZeroDivisionError):
        return None


def dms_to_decimal(dms: Any, ref: Any = None) -> Optional[float]:
    """GPS (degrees, minutes[, seconds]) plus hemisphere ref -> decimal degrees."""
    if not isinstance(dms, (tuple, list)) or len(dms) not in (2, 3):
        return None
    parts = [rational_to_float(part) for part in dms]
    if any(part is None for part in parts):
        return None
    d, m = parts[0], parts[1]
    s = parts[2] if len(parts) == 3 else 0.0
    decimal = d + m / 60.0 + s / 3600.0
    if isinstance(ref, bytes):
        ref = ref.decode("ascii", errors="ignore")
    if isinstance(ref, str) and ref.strip().upper() in ("S", "W"):
        decimal = -decimal
    return decimal


def decode_user_comment(value: bytes, endian: Optional[str] = "<") -> str:
    """Strip the character-code prefix of an EXIF UserComment.

    Args:
        value: Raw tag bytes.
        endian: Byte order of the TIFF header, "<" or ">".
    """
    if value[:8] == _UNICODE_PREFIX:
        encoding = _UTF16_BY_ENDIAN.get(endian, "utf-16-le")
        return value[8:].decode(encoding, errors="replace").strip("\x00 ")
    encoding = _COMMENT_ENCODINGS.get(value[:8])
    if encoding is None:
        return value.decode("utf-8", errors="replace").strip("\x00 ")
    return value[8:].decode(encoding, errors="replace").strip("\x00 ")


def translate_value(tag: str, value: Any, endian: Optional[str] = "<") -> Any:
    """Convert a Pillow tag value into a plain, human-readable value."""
    if tag == "UserComment" and isinstance(value, bytes):
        return decode_user_comment(value, endian)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").strip("\x00 ")
    if isinstance(value, str):
        return value.strip("\x00 ")
    return value


def gps_coordinates(gps_ifd: Dict[int, Any]) -> Dict[str, float]:
    """Decimal latitude/longitude from a GPS IFD; only the keys that decode."""
    coords = {}
    lat = dms_to_decimal(gps_ifd.get(GPS.GPSLatitude), gps_ifd.get(GPS.GPSLatitudeRef))
    lng = dms_to_decimal(gps_ifd.get(GPS.GPSLongitude), gps_ifd.get(GPS.GPSLongitudeRef))
    if lat is not None:
        coords["latitude"] = lat
    if lng is not None:
        coords["longitude"] = lng
    return coords


def read_exif(path: Union[str, Path]) -> Optional[RawMetadata]:
    """Decode all supported metadata from an image file.

    Args:
        path: Image file path.

    Returns:
        Flat tag-name -> value record, or None when the image carries no
        metadata.

    Raises:
        OSError: If the file is missing or not a readable image.
    """
    with Image.open(path) as img:
        exif = img.getexif()
        endian = exif.endian

        raw: RawMetadata = {}
        for tag_id, value in exif.items():
            name = TAGS.get(tag_id, str(tag_id))
            raw[name] = translate_value(name, value, endian)

        for tag_id, value in exif.get_ifd(IFD.Exif).items():
            name = TAGS.get(tag_id, str(tag_id))
            raw[name] = translate_value(name, value, endian)

        gps_ifd = exif.get_ifd(IFD.GPSInfo)
        for tag_id, value in gps_ifd.items():
            name = GPSTAGS.get(tag_id, str(tag_id))
            raw[name] = translate_value(name, value, endian)
        try:
            raw.update(gps_coordinates(gps_ifd))
        except (TypeError, ValueError, ArithmeticError) as e:
            # location only, the other tags are kept
            logger.warning(f"Unreadable GPS data in {path}: {e}")

        # PNG tEXt/iTXt chunks
        description = img.info.get("Description")
        if isinstance(description, str) and "ImageDescription" not in raw:
            raw["ImageDescription"] = description

    # Sub-IFD pointers are offsets, not metadata.
    raw.pop("ExifOffset", None)
    raw.pop("GPSInfo", None)

    if not raw:
        logger.debug(f"No metadata found in {path}")
        return None
    return raw
