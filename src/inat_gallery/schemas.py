"""
API response models.

pydantic models for the parts of the iNaturalist API v1 responses we read.
Unknown keys are ignored; a payload that does not validate is treated by the
resolver as an empty result for that step.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# =============================================================================
# Taxa (GET /taxa)
# =============================================================================


class TaxonMatch(BaseModel):
    """One hit from the taxon search."""

    id: int | None = None
    name: str | None = None
    rank: str | None = None


class TaxaResponse(BaseModel):
    """Taxon search response."""

    total_results: int | None = None
    results: list[TaxonMatch] = Field(default_factory=list)

    @property
    def first_id(self) -> int | None:
        """Identifier of the first result, if there is one."""
        return self.results[0].id if self.results else None


# =============================================================================
# Observations (GET /observations)
# =============================================================================


class Photo(BaseModel):
    """Observation photo. ``url`` is the square-size variant; the API sometimes omits it."""

    id: int | None = None
    url: str | None = None


class TaxonRef(BaseModel):
    """The taxon an observation is currently identified as."""

    id: int | None = None
    name: str | None = None


class ObservationRecord(BaseModel):
    """A single observation as returned by the API."""

    id: int
    photos: list[Photo] = Field(default_factory=list)
    taxon: TaxonRef | None = None
    uri: str | None = None
    location: str | None = Field(default=None, description='"lat,lon" string')

    @property
    def taxon_name(self) -> str | None:
        return self.taxon.name if self.taxon else None


class ObservationsResponse(BaseModel):
    """Observation search response."""

    total_results: int | None = None
    page: int | None = None
    per_page: int | None = None
    results: list[ObservationRecord] = Field(default_factory=list)
