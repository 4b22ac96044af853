"""Shared fixtures for travel-page tests."""

from pathlib import Path
from typing import Any, Dict, Optional

import pytest
from PIL import Image

# Base IFD tag ids
MAKE = 0x010F
MODEL = 0x0110
DATE_TIME = 0x0132
IMAGE_DESCRIPTION = 0x010E

TEMPLATE_TEXT = "<head/>\n<!-- PUT CONTENT HERE -->\n<foot/>"


def make_image(
    path: Path,
    exif: Optional[Dict[int, Any]] = None,
    size=(16, 12),
    fmt: Optional[str] = None,
) -> Path:
    """Write a small solid-color image, optionally with EXIF tags (dict values become sub-IFDs)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new("RGB", size, color=(200, 120, 40))
    if exif:
        data = Image.Exif()
        for tag, value in exif.items():
            data[tag] = value
        img.save(path, fmt, exif=data)
    else:
        img.save(path, fmt)
    return path


@pytest.fixture
def site(tmp_path):
    """A site root with an empty travel directory and a template."""
    travel_dir = tmp_path / "public" / "travel"
    travel_dir.mkdir(parents=True)
    template = tmp_path / "templates" / "travel_template.html"
    template.parent.mkdir()
    template.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def canon_exif():
    return {
        MAKE: "Canon",
        MODEL: "EOS R5",
        DATE_TIME: "2023:07:15 14:30:00",
        IMAGE_DESCRIPTION: "Eiffel Tower at dusk",
    }
