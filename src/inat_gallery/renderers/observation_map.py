"""Leaflet map renderer for gallery observations.

One marker per located observation; the popup shows the observation's first
photo and links to the observation page.
"""

from __future__ import annotations

from typing import Any

from inat_gallery.datasources.inaturalist.models import LocationPoint
from inat_gallery.renderers import render_template


def _marker(point: LocationPoint) -> dict[str, Any]:
    return {
        "lat": float(point.latitude),
        "lon": float(point.longitude),
        "url": point.observation_uri,
        "photo": point.representative_photo_url or "",
    }


def build_observation_map_html(
    locations: list[LocationPoint],
    gallery_id: str,
) -> tuple[str, str]:
    """Build an interactive Leaflet map of observation locations.

    Returns a (map_div_html, map_script_js) tuple. Both are empty when there
    are no locations.
    """
    if not locations:
        return ("", "")

    map_id = f"{gallery_id}-map"
    map_div = render_template(
        "observation_map.html.j2",
        map_id=map_id,
        point_count=len(locations),
    )
    map_script = render_template(
        "observation_map_script.html.j2",
        map_id=map_id,
        markers=[_marker(p) for p in locations],
    )
    return (map_div, map_script)
