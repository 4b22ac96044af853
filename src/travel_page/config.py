"""Build configuration for travel-page."""

from pathlib import Path
from typing import Optional, Union

from travel_page.gallery.page import CONTENT_MARKER, IMAGE_URL_PREFIX

# Fixed locations, relative to the site root the build runs in
DEFAULT_TRAVEL_DIR = "./public/travel"
DEFAULT_TEMPLATE_FILE = "./templates/travel_template.html"
DEFAULT_OUTPUT_FILE = "travel.html"

PathLike = Union[str, Path]


class BuildConfig:
    """Paths and constants for one page build."""

    def __init__(
        self,
        travel_dir: Optional[PathLike] = None,
        template_file: Optional[PathLike] = None,
        output_file: Optional[PathLike] = None,
        image_url_prefix: Optional[str] = None,
        marker: Optional[str] = None,
    ):
        self.travel_dir = Path(travel_dir or DEFAULT_TRAVEL_DIR)
        self.template_file = Path(template_file or DEFAULT_TEMPLATE_FILE)
        self.output_file = Path(output_file or DEFAULT_OUTPUT_FILE)
        self.image_url_prefix = image_url_prefix or IMAGE_URL_PREFIX
        self.marker = marker or CONTENT_MARKER

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "travel_dir": str(self.travel_dir),
            "template_file": str(self.template_file),
            "output_file": str(self.output_file),
            "image_url_prefix": self.image_url_prefix,
            "marker": self.marker,
        }

    def __repr__(self) -> str:
        return f"BuildConfig({self.to_dict()!r})"


def get_default_config() -> BuildConfig:
    """Create the fixed default configuration."""
    return BuildConfig()
