"""Resolution outcomes and the normalized gallery model."""

from __future__ import annotations

from dataclasses import dataclass, field

from inat_gallery.schemas import ObservationRecord

# =============================================================================
# Errors
# =============================================================================


class EmptyNameError(ValueError):
    """No species name to resolve.

    The caller must substitute a default (e.g. the page title) first.
    """

    def __init__(self, message: str = "No species name provided.") -> None:
        super().__init__(message)


# =============================================================================
# Resolution strategy (tagged union)
# =============================================================================


@dataclass(frozen=True)
class StandardTaxonomy:
    """Observations found through a standard taxon id."""

    taxon_id: int

    @property
    def label(self) -> str:
        return f"standard taxonomy (taxon_id: {self.taxon_id})"


@dataclass(frozen=True)
class ProvisionalName:
    """Observations found through the "Provisional Species Name" field."""

    name: str

    @property
    def label(self) -> str:
        return "Provisional Species Name"


ResolutionStrategy = StandardTaxonomy | ProvisionalName


@dataclass(frozen=True)
class Resolution:
    """What the resolver committed to, with the raw API results."""

    query: str
    strategy: ResolutionStrategy
    observations: list[ObservationRecord]
    total_results: int


@dataclass(frozen=True)
class NotFound:
    """Both lookup paths came back empty. A normal outcome, not an error."""

    query: str


# =============================================================================
# Normalized model
# =============================================================================


@dataclass(frozen=True)
class NormalizedPhoto:
    """One photo of one observation, ready for display."""

    display_url: str
    original_url: str
    taxon_name: str
    observation_uri: str
    observation_id: int
    photo_index: int  # 1-based
    total_photos_in_observation: int

    @property
    def caption(self) -> str:
        if self.total_photos_in_observation == 1:
            return self.taxon_name
        return f"{self.taxon_name} (photo {self.photo_index} of {self.total_photos_in_observation})"


@dataclass(frozen=True)
class LocationPoint:
    """A geolocated observation. Coordinates are kept as the API's strings."""

    latitude: str
    longitude: str
    observation_uri: str
    representative_photo_url: str | None = None


@dataclass
class GalleryResult:
    """Everything a renderer needs for one gallery."""

    query: str
    found_by: ResolutionStrategy
    total_results: int
    regular_photos: list[NormalizedPhoto] = field(default_factory=list)
    all_photos: list[NormalizedPhoto] = field(default_factory=list)
    locations: list[LocationPoint] = field(default_factory=list)
    total_photos: int = 0

    @property
    def observation_count(self) -> int:
        """Observations that contributed at least one photo."""
        return len(self.regular_photos)
