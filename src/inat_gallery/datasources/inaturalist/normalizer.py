"""Turn raw observations into the photo and location lists a gallery shows.

Pure functions; no network access.
"""

from __future__ import annotations

import math

from inat_gallery.datasources.inaturalist.client import observation_url
from inat_gallery.datasources.inaturalist.models import (
    GalleryResult,
    LocationPoint,
    NormalizedPhoto,
    Resolution,
    ResolutionStrategy,
)
from inat_gallery.schemas import ObservationRecord

# Photo URLs from the API point at the square thumbnail, e.g.
# https://inaturalist-open-data.s3.amazonaws.com/photos/123/square.jpg
BASE_SIZE = "square"
DISPLAY_SIZE = "medium"
ORIGINAL_SIZE = "original"

UNKNOWN_TAXON = "Unknown Taxon"


def derive_size_variant(url: str, size: str, *, base: str = BASE_SIZE) -> str:
    """Swap the size keyword in a photo URL. URLs without it pass through."""
    return url.replace(base, size)


def parse_location(location: str | None) -> tuple[str, str] | None:
    """Split a ``"lat,lon"`` string into two trimmed, finite numeric components."""
    if not location or "," not in location:
        return None

    parts = [p.strip() for p in location.split(",")]
    if len(parts) != 2:
        return None

    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    # float() accepts "nan" and "inf"; Leaflet does not
    if not all(math.isfinite(v) for v in values):
        return None
    return parts[0], parts[1]


def _observation_uri(obs: ObservationRecord) -> str:
    return obs.uri or observation_url(obs.id)


def _photo_urls(obs: ObservationRecord) -> list[str]:
    return [photo.url for photo in obs.photos if photo.url]


def normalize_photos(obs: ObservationRecord) -> list[NormalizedPhoto]:
    """Every photo of one observation that has a URL, in order, numbered from 1."""
    urls = _photo_urls(obs)
    taxon_name = obs.taxon_name or UNKNOWN_TAXON
    uri = _observation_uri(obs)
    return [
        NormalizedPhoto(
            display_url=derive_size_variant(url, DISPLAY_SIZE),
            original_url=derive_size_variant(url, ORIGINAL_SIZE),
            taxon_name=taxon_name,
            observation_uri=uri,
            observation_id=obs.id,
            photo_index=index,
            total_photos_in_observation=len(urls),
        )
        for index, url in enumerate(urls, start=1)
    ]


def location_point(obs: ObservationRecord) -> LocationPoint | None:
    """Map point for an observation, or None if it has no usable location."""
    coords = parse_location(obs.location)
    if coords is None:
        return None
    urls = _photo_urls(obs)
    photo_url = derive_size_variant(urls[0], DISPLAY_SIZE) if urls else None
    return LocationPoint(
        latitude=coords[0],
        longitude=coords[1],
        observation_uri=_observation_uri(obs),
        representative_photo_url=photo_url,
    )


def normalize_observations(
    observations: list[ObservationRecord],
    *,
    query: str,
    found_by: ResolutionStrategy,
    total_results: int,
) -> GalleryResult:
    """
    Build a ``GalleryResult`` from observations in API order.

    ``regular_photos`` holds the first photo of each observation that has
    photos; ``all_photos`` holds every photo. Observations without photos
    can still contribute a location.
    """
    result = GalleryResult(query=query, found_by=found_by, total_results=total_results)

    for obs in observations:
        photos = normalize_photos(obs)
        if photos:
            result.regular_photos.append(photos[0])
            result.all_photos.extend(photos)

        point = location_point(obs)
        if point is not None:
            result.locations.append(point)

    result.total_photos = len(result.all_photos)
    return result


def normalize(resolution: Resolution) -> GalleryResult:
    """Normalize the output of ``resolver.resolve``."""
    return normalize_observations(
        resolution.observations,
        query=resolution.query,
        found_by=resolution.strategy,
        total_results=resolution.total_results,
    )
