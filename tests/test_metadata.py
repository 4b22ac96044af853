"""Tests for metadata decoding and normalization."""

from datetime import datetime
from fractions import Fraction

import pytest
from PIL.ExifTags import GPS, IFD
from PIL.TiffImagePlugin import IFDRational

from conftest import DATE_TIME, MAKE, MODEL, make_image
from travel_page.gallery.exif import (
    decode_user_comment,
    dms_to_decimal,
    gps_coordinates,
    rational_to_float,
    read_exif,
    translate_value,
)
from travel_page.gallery.metadata import (
    extract_metadata,
    format_timestamp,
    normalize_metadata,
    parse_timestamp,
)
from travel_page.gallery.models import FALLBACK_METADATA, Location, NormalizedMetadata

FALLBACK = NormalizedMetadata(
    date="Unknown date", camera="Unknown camera", location=None, description=None
)


class TestNormalizeMetadata:
    """Test the raw -> normalized conversion."""

    def test_empty_record_is_fallback(self):
        assert normalize_metadata(None) == FALLBACK
        assert normalize_metadata({}) == FALLBACK
        assert FALLBACK_METADATA == FALLBACK

    def test_full_record(self):
        meta = normalize_metadata({
            "DateTimeOriginal": "2023:07:15 14:30:00",
            "DateTime": "2024:01:01 00:00:00",
            "Make": "Canon",
            "Model": "EOS R5",
            "latitude": 48.8584,
            "longitude": 2.2945,
            "ImageDescription": "Eiffel Tower",
            "UserComment": "ignored",
        })
        assert meta.date == "Saturday, July 15, 2023, 02:30 PM"
        assert meta.camera == "Canon EOS R5"
        assert meta.location == Location(lat=48.8584, lng=2.2945)
        assert meta.description == "Eiffel Tower"

    def test_date_falls_back_to_modify_date(self):
        meta = normalize_metadata({"DateTime": "2024:01:01 09:05:00"})
        assert meta.date == "Monday, January 1, 2024, 09:05 AM"

    def test_malformed_original_date_uses_next_tag(self):
        meta = normalize_metadata({
            "DateTimeOriginal": "0000:00:00 00:00:00",
            "DateTime": "2024:01:01 09:05:00",
        })
        assert meta.date == "Monday, January 1, 2024, 09:05 AM"

    def test_malformed_date_never_raises(self):
        meta = normalize_metadata({"DateTimeOriginal": "not a date", "DateTime": 42})
        assert meta.date == "Unknown date"

    def test_datetime_value(self):
        meta = normalize_metadata({"DateTimeOriginal": datetime(2023, 7, 15, 0, 5)})
        assert meta.date == "Saturday, July 15, 2023, 12:05 AM"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ({"Make": "Canon", "Model": "EOS R5"}, "Canon EOS R5"),
            ({"Make": "Canon"}, "Canon"),
            ({"Model": "iPhone 14 Pro"}, "iPhone 14 Pro"),
            ({"Make": "  ", "Model": "X100V"}, "X100V"),
            ({"Make": ""}, "Unknown camera"),
            ({"Orientation": 1}, "Unknown camera"),
        ],
    )
    def test_camera(self, raw, expected):
        assert normalize_metadata(raw).camera == expected

    def test_location_requires_both_coordinates(self):
        assert normalize_metadata({"latitude": 48.85}).location is None
        assert normalize_metadata({"longitude": 2.29}).location is None
        assert normalize_metadata({"latitude": "north", "longitude": 2.29}).location is None

    def test_location_zero_is_valid(self):
        meta = normalize_metadata({"latitude": 0.0, "longitude": -78.5})
        assert meta.location == Location(lat=0.0, lng=-78.5)

    def test_description_falls_back_to_user_comment(self):
        assert normalize_metadata({"UserComment": "Sunset"}).description == "Sunset"
        assert normalize_metadata({"ImageDescription": "", "UserComment": "Sunset"}).description == "Sunset"
        assert normalize_metadata({"Make": "Canon"}).description is None


class TestTimestamps:
    """Test timestamp parsing and formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2023:07:15 14:30:00", datetime(2023, 7, 15, 14, 30)),
            ("2023:07:15 14:30:00.123", datetime(2023, 7, 15, 14, 30)),
            ("2023:07:15 14:30:00+02:00", datetime(2023, 7, 15, 14, 30)),
            ("2023-07-15T14:30:00", datetime(2023, 7, 15, 14, 30)),
            ("garbage", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse_timestamp(self, value, expected):
        assert parse_timestamp(value) == expected

    def test_format_noon_and_midnight(self):
        assert format_timestamp(datetime(2023, 7, 15, 12, 0)) == "Saturday, July 15, 2023, 12:00 PM"
        assert format_timestamp(datetime(2023, 7, 16, 0, 0)) == "Sunday, July 16, 2023, 12:00 AM"


class TestExifHelpers:
    """Test the Pillow value converters."""

    def test_rational_to_float(self):
        assert rational_to_float(Fraction(1, 4)) == 0.25
        assert rational_to_float((3, 2)) == 1.5
        assert rational_to_float((1, 0)) is None
        assert rational_to_float(7) == 7.0
        assert rational_to_float(None) is None

    def test_dms_to_decimal(self):
        assert dms_to_decimal((48, 51, 30.24), "N") == pytest.approx(48.8584)
        assert dms_to_decimal((2, 17, 40.2), "W") == pytest.approx(-2.2945)
        assert dms_to_decimal((33, 52, 4.0), b"S") == pytest.approx(-33.867778, rel=1e-6)
        assert dms_to_decimal((48, 30)) == pytest.approx(48.5)
        assert dms_to_decimal((48,)) is None
        assert dms_to_decimal(None) is None

    def test_dms_to_decimal_single_rational(self):
        assert dms_to_decimal(IFDRational(48), "N") is None
        assert dms_to_decimal(48.85, "N") is None
        assert dms_to_decimal("48 51 30", "N") is None

    def test_gps_coordinates(self):
        gps_ifd = {1: "N", 2: (48, 51, 30.24), 3: "E", 4: (2, 17, 40.2)}
        coords = gps_coordinates(gps_ifd)
        assert coords["latitude"] == pytest.approx(48.8584)
        assert coords["longitude"] == pytest.approx(2.2945)

    def test_gps_coordinates_partial(self):
        assert gps_coordinates({1: "N", 2: (48, 51, 30.24)}) == {"latitude": pytest.approx(48.8584)}

    def test_decode_user_comment(self):
        assert decode_user_comment(b"ASCII\x00\x00\x00Sunset") == "Sunset"
        assert decode_user_comment(b"plain text\x00") == "plain text"

    @pytest.mark.parametrize(
        "endian,codec",
        [("<", "utf-16-le"), (">", "utf-16-be")],
    )
    def test_decode_unicode_user_comment_follows_byte_order(self, endian, codec):
        value = b"UNICODE\x00" + "Été au lac".encode(codec)
        assert decode_user_comment(value, endian) == "Été au lac"

    def test_decode_unicode_user_comment_big_endian(self):
        value = b"UNICODE\x00" + "Sunset".encode("utf-16-be")
        assert decode_user_comment(value, ">") == "Sunset"
        assert translate_value("UserComment", value, ">") == "Sunset"


class TestExtractMetadata:
    """Test decoding real files."""

    def test_jpeg_with_exif(self, tmp_path, canon_exif):
        path = make_image(tmp_path / "photo.jpg", canon_exif)

        raw = read_exif(path)
        assert raw["Make"] == "Canon"

        meta = extract_metadata(path)
        assert meta.date == "Saturday, July 15, 2023, 02:30 PM"
        assert meta.camera == "Canon EOS R5"
        assert meta.description == "Eiffel Tower at dusk"
        assert meta.location is None

    def test_jpeg_without_exif(self, tmp_path):
        path = make_image(tmp_path / "plain.jpg")
        assert read_exif(path) is None
        assert extract_metadata(path) == FALLBACK

    def test_png_without_metadata(self, tmp_path):
        path = make_image(tmp_path / "plain.png")
        assert extract_metadata(path) == FALLBACK

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"not really a jpeg")
        assert extract_metadata(path) == FALLBACK

    def test_missing_file(self, tmp_path):
        assert extract_metadata(tmp_path / "missing.jpg") == FALLBACK

    def test_decoder_error_is_absorbed(self, tmp_path):
        def failing_decoder(path):
            raise ValueError("decoder crashed")

        assert extract_metadata(tmp_path / "x.jpg", decoder=failing_decoder) == FALLBACK

    def test_custom_decoder(self, tmp_path):
        def decoder(path):
            return {"Model": "Pixel 8", "latitude": 35.0, "longitude": 135.75}

        meta = extract_metadata(tmp_path / "x.jpg", decoder=decoder)
        assert meta.camera == "Pixel 8"
        assert meta.location.map_url == "https://maps.google.com/?q=35.0,135.75"

    def test_jpeg_with_gps(self, tmp_path):
        """A real GPS IFD produces a location with hemisphere signs applied."""
        gps = {
            GPS.GPSLatitudeRef: "N",
            GPS.GPSLatitude: (IFDRational(48), IFDRational(51), IFDRational(3024, 100)),
            GPS.GPSLongitudeRef: "W",
            GPS.GPSLongitude: (IFDRational(2), IFDRational(17), IFDRational(402, 10)),
        }
        path = make_image(tmp_path / "gps.jpg", {MAKE: "Canon", IFD.GPSInfo: gps})

        raw = read_exif(path)
        assert raw["latitude"] == pytest.approx(48.8584, abs=1e-4)
        assert raw["longitude"] == pytest.approx(-2.2945, abs=1e-4)

        meta = extract_metadata(path)
        assert meta.location.lat == pytest.approx(48.8584, abs=1e-4)
        assert meta.location.lng == pytest.approx(-2.2945, abs=1e-4)
        assert meta.camera == "Canon"

    def test_malformed_gps_keeps_other_tags(self, tmp_path):
        """A single rational latitude loses the location only."""
        path = make_image(
            tmp_path / "bad_gps.jpg",
            {
                MAKE: "Canon",
                MODEL: "EOS R5",
                DATE_TIME: "2023:07:15 14:30:00",
                IFD.GPSInfo: {GPS.GPSLatitude: IFDRational(48)},
            },
        )

        meta = extract_metadata(path)
        assert meta.camera == "Canon EOS R5"
        assert meta.date == "Saturday, July 15, 2023, 02:30 PM"
        assert meta.location is None
