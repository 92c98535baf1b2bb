"""
Shared fixtures.
"""

from __future__ import annotations

import pytest

from inat_gallery.datasources.inaturalist.models import GalleryResult, StandardTaxonomy
from inat_gallery.datasources.inaturalist.normalizer import normalize_observations
from inat_gallery.schemas import ObservationRecord
from samples import SAMPLE_OBSERVATIONS


@pytest.fixture
def observations() -> list[ObservationRecord]:
    return [ObservationRecord.model_validate(o) for o in SAMPLE_OBSERVATIONS]


@pytest.fixture
def gallery_result(observations: list[ObservationRecord]) -> GalleryResult:
    return normalize_observations(
        observations,
        query="Amanita muscaria",
        found_by=StandardTaxonomy(48715),
        total_results=57,
    )
