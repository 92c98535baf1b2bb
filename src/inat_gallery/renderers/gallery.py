"""Photo gallery renderer.

Builds the summary line, the photo grid (first photo per observation), the
lightbox over every photo, the observation map and the link back to the
iNaturalist search page.
"""

from __future__ import annotations

from typing import Any

from inat_gallery.datasources.inaturalist.client import search_page_url
from inat_gallery.datasources.inaturalist.models import (
    GalleryResult,
    NormalizedPhoto,
    StandardTaxonomy,
)
from inat_gallery.renderers import render_template
from inat_gallery.renderers.observation_map import build_observation_map_html

DEFAULT_DISPLAY_LIMIT = 24


def _link_text(result: GalleryResult) -> str:
    if isinstance(result.found_by, StandardTaxonomy):
        return f"Sequenced iNaturalist observations for {result.query}"
    return f"iNaturalist observations for provisional species name {result.query}"


def _lightbox_photo(photo: NormalizedPhoto) -> dict[str, Any]:
    return {
        "src": photo.original_url,
        "thumb": photo.display_url,
        "caption": photo.caption,
        "url": photo.observation_uri,
    }


def _lightbox_start_indexes(result: GalleryResult) -> dict[int, int]:
    """Position in ``all_photos`` where each observation's photos begin."""
    starts: dict[int, int] = {}
    for pos, photo in enumerate(result.all_photos):
        if photo.photo_index == 1:
            starts.setdefault(photo.observation_id, pos)
    return starts


def build_gallery_html(
    result: GalleryResult,
    gallery_id: str,
    *,
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
) -> str:
    """Build the HTML fragment for one gallery.

    Args:
        result: Normalized gallery model.
        gallery_id: Request-scoped id used to namespace DOM ids.
        display_limit: Maximum number of tiles in the grid. The lightbox
            always includes every photo.
    """
    starts = _lightbox_start_indexes(result)
    tiles = [
        {
            "src": photo.display_url,
            "alt": photo.taxon_name,
            "taxon_name": photo.taxon_name,
            "url": photo.observation_uri,
            "photo_count": photo.total_photos_in_observation,
            "lightbox_index": starts.get(photo.observation_id, 0),
        }
        for photo in result.regular_photos[:display_limit]
    ]

    map_div, map_script = build_observation_map_html(result.locations, gallery_id)

    return render_template(
        "gallery.html.j2",
        gallery_id=gallery_id,
        query=result.query,
        found_by=result.found_by.label,
        sequenced=isinstance(result.found_by, StandardTaxonomy),
        total_results=result.total_results,
        truncated=result.total_results > display_limit,
        shown=len(tiles),
        observation_count=result.observation_count,
        total_photos=result.total_photos,
        tiles=tiles,
        lightbox_photos=[_lightbox_photo(p) for p in result.all_photos],
        map_div=map_div,
        map_script=map_script,
        search_url=search_page_url(result.found_by),
        link_text=_link_text(result),
    )


def build_not_found_html(query: str) -> str:
    """Message shown when neither lookup found observations."""
    return render_template(
        "message.html.j2",
        css_class="error",
        message=f"No observations found for the species name {query}.",
    )


def build_error_html(message: str) -> str:
    """Generic error box, e.g. for a missing species name."""
    return render_template("message.html.j2", css_class="error", message=f"Error: {message}")


def build_page_html(title: str, body: str) -> str:
    """Wrap a fragment in a standalone HTML page."""
    return render_template("page.html.j2", title=title, body=body)
