"""Render trips into HTML and place them into the page template."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from jinja2 import Environment
from markupsafe import Markup

from travel_page.gallery.models import Trip

logger = logging.getLogger(__name__)

_jinja_env = Environment(autoescape=True)
Template = _jinja_env.from_string

IMAGE_URL_PREFIX = "/public/travel"
CONTENT_MARKER = "<!-- PUT CONTENT HERE -->"
NO_TRIPS_PLACEHOLDER = '<div class="no-trips"><h2>No trips found</h2></div>'

IMAGE_TEMPLATE = Template("""
        <div class="image-container">
            <img src="{{ url_prefix }}/{{ image.relative_path }}" alt="{{ image.alt }}" loading="lazy">
            <div class="image-info">
                <p class="date">📅 {{ image.metadata.date }}</p>
                <p class="camera">📷 {{ image.metadata.camera }}</p>
                {%- if image.metadata.location %}
                <p class="location">📍 <a href="{{ image.metadata.location.map_url }}" target="_blank">View on Map</a></p>
                {%- endif %}
                {%- if image.metadata.description %}
                <p class="description">📝 {{ image.metadata.description }}</p>
                {%- endif %}
            </div>
        </div>""")

TRIP_TEMPLATE = Template("""
    <section class="trip-section" id="{{ trip.anchor_id }}">
        <div class="trip-header">
            <h2 class="trip-title">{{ trip.name }}</h2>
            <div class="trip-meta">
                <span class="trip-count">{{ trip.photo_count }} photos</span>
            </div>
        </div>
        <div class="gallery">
            {{ images }}
        </div>
    </section>""")


def render_trip(trip: Trip, url_prefix: str = IMAGE_URL_PREFIX) -> str:
    """Render one trip as a ``<section>`` holding all of its images."""
    images = "".join(
        IMAGE_TEMPLATE.render(image=image, url_prefix=url_prefix) for image in trip.images
    )
    return TRIP_TEMPLATE.render(trip=trip, images=Markup(images))


def render_content(trips: Sequence[Trip], url_prefix: str = IMAGE_URL_PREFIX) -> str:
    """Concatenate the trip sections, or the placeholder when there are none."""
    if not trips:
        return NO_TRIPS_PLACEHOLDER
    return "".join(render_trip(trip, url_prefix) for trip in trips)


def substitute_content(template_text: str, content: str, marker: str = CONTENT_MARKER) -> str:
    """Replace the first marker occurrence; text without a marker is returned as is."""
    return template_text.replace(marker, content, 1)


def assemble_page(
    trips: Sequence[Trip],
    template_path: Union[str, Path],
    url_prefix: str = IMAGE_URL_PREFIX,
    marker: str = CONTENT_MARKER,
) -> Optional[str]:
    """Render all trips into the page template.

    Args:
        trips: Trips in display order.
        template_path: HTML template containing the content marker.
        url_prefix: URL path under which trip directories are served.
        marker: Token in the template replaced by the rendered trips.

    Returns:
        The complete page, or None if the template cannot be read.
    """
    content = render_content(trips, url_prefix)
    try:
        template_text = Path(template_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading template file {template_path}: {e}")
        return None
    return substitute_content(template_text, content, marker)
