"""
iNaturalist API client.

Low-level HTTP wrappers for the two endpoints the gallery uses, plus the
query-string and deep-link builders.

API docs: https://api.inaturalist.org/v1/docs/

Observation-field filters are written as ``field:<Field Name>=<value>``. The
key must reach the API literally; only the value is percent-encoded. That is
why observation queries go through ``build_query`` instead of ``params=``,
which would encode the colon and the spaces in the key.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, quote_plus

from inat_gallery.datasources.inaturalist.models import (
    ProvisionalName,
    ResolutionStrategy,
    StandardTaxonomy,
)
from inat_gallery.schemas import ObservationsResponse, TaxaResponse
from inat_gallery.services.http import session

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.inaturalist.org/v1"
WEB_BASE = "https://www.inaturalist.org"

# The provisional path asks for fewer results than the taxonomy path.
STANDARD_PER_PAGE = 200
PROVISIONAL_PER_PAGE = 100

# ---------------------------------------------------------------------------
# Observation fields
# ---------------------------------------------------------------------------
DNA_BARCODE_FIELD = "field:DNA Barcode ITS"
PROVISIONAL_NAME_FIELD = "field:Provisional Species Name"


def build_query(params: dict[str, Any]) -> str:
    """Join params into a query string with literal keys and encoded values."""
    return "&".join(f"{key}={quote(str(value), safe='')}" for key, value in params.items())


def _base_observation_params() -> dict[str, Any]:
    return {
        "order_by": "id",
        "order": "desc",
        "page": 1,
        "spam": "false",
    }


def standard_observation_params(taxon_id: int) -> dict[str, Any]:
    """Sequenced observations (``DNA Barcode ITS`` present) of a taxon."""
    return {
        **_base_observation_params(),
        "taxon_id": taxon_id,
        DNA_BARCODE_FIELD: "",
        "per_page": STANDARD_PER_PAGE,
        "return_bounds": "true",
    }


def provisional_observation_params(name: str) -> dict[str, Any]:
    """Observations whose "Provisional Species Name" field equals ``name``."""
    return {
        **_base_observation_params(),
        PROVISIONAL_NAME_FIELD: name,
        "per_page": PROVISIONAL_PER_PAGE,
        "return_bounds": "true",
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


def search_taxa(name: str) -> TaxaResponse:
    """GET /taxa?q=: standard taxonomy search."""
    url = f"{API_BASE}/taxa"
    logger.debug("Taxon search for %r: %s?q=%s", name, url, quote_plus(name))
    resp = session.get(url, params={"q": name})
    resp.raise_for_status()
    return TaxaResponse.model_validate(resp.json())


def get_observations(params: dict[str, Any]) -> ObservationsResponse:
    """GET /observations: search observations."""
    url = f"{API_BASE}/observations?{build_query(params)}"
    logger.debug("Observation search: %s", url)
    resp = session.get(url)
    resp.raise_for_status()
    return ObservationsResponse.model_validate(resp.json())


# ---------------------------------------------------------------------------
# Links back to the website
# ---------------------------------------------------------------------------


def search_page_url(strategy: ResolutionStrategy) -> str:
    """Deep link to the iNaturalist observation search for a resolved gallery."""
    if isinstance(strategy, StandardTaxonomy):
        return (
            f"{WEB_BASE}/observations?subview=map"
            f"&taxon_id={strategy.taxon_id}&field:DNA%20Barcode%20ITS="
        )
    if isinstance(strategy, ProvisionalName):
        return (
            f"{WEB_BASE}/observations?verifiable=any&place_id=any"
            f"&field:Provisional%20Species%20Name={quote_plus(strategy.name)}"
        )
    raise TypeError(f"Unknown resolution strategy: {strategy!r}")


def observation_url(observation_id: int) -> str:
    """Web page of a single observation."""
    return f"{WEB_BASE}/observations/{observation_id}"
