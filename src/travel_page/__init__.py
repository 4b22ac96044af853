"""travel-page - build a static travel photo page from trip albums."""

__version__ = "0.1.0"
__author__ = "travel-page contributors"
__license__ = "MIT"

import logging

# Public API
from .config import BuildConfig, get_default_config
from .gallery import assemble_page, build_trip, extract_metadata, format_trip_name, render_trip
from .main import BuildError, BuildResult, build_travel_page, run

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "BuildConfig",
    "BuildError",
    "BuildResult",
    "assemble_page",
    "build_travel_page",
    "build_trip",
    "extract_metadata",
    "format_trip_name",
    "get_default_config",
    "render_trip",
    "run",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
