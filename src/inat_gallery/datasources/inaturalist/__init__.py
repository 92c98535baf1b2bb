"""iNaturalist observation galleries.

Resolves a species name to iNaturalist observations and normalizes them into
photo and location lists for rendering.

Public API:
  - client: Low-level HTTP, query and link builders
  - resolver: resolve, is_provisional_name
  - normalizer: normalize, normalize_observations, derive_size_variant, parse_location
  - models: GalleryResult, NormalizedPhoto, LocationPoint, Resolution, NotFound,
    StandardTaxonomy, ProvisionalName, EmptyNameError
"""

from inat_gallery.datasources.inaturalist.client import search_page_url
from inat_gallery.datasources.inaturalist.models import (
    EmptyNameError,
    GalleryResult,
    LocationPoint,
    NormalizedPhoto,
    NotFound,
    ProvisionalName,
    Resolution,
    ResolutionStrategy,
    StandardTaxonomy,
)
from inat_gallery.datasources.inaturalist.normalizer import (
    derive_size_variant,
    normalize,
    normalize_observations,
    parse_location,
)
from inat_gallery.datasources.inaturalist.resolver import is_provisional_name, resolve

__all__ = [
    "EmptyNameError",
    "GalleryResult",
    "LocationPoint",
    "NormalizedPhoto",
    "NotFound",
    "ProvisionalName",
    "Resolution",
    "ResolutionStrategy",
    "StandardTaxonomy",
    "derive_size_variant",
    "is_provisional_name",
    "normalize",
    "normalize_observations",
    "parse_location",
    "resolve",
    "search_page_url",
]
