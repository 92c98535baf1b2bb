"""Taxon resolution: decide which observation query to run, with fallback.

Order of attempts for a name:

1. Names containing ``'`` or ``"`` are provisional. They go straight to the
   "Provisional Species Name" field search.
2. Otherwise look the name up in the standard taxonomy and fetch sequenced
   (``DNA Barcode ITS``) observations of the first matching taxon.
3. If step 2 found no taxon or no observations, fall back to the
   provisional-name search.

Each query runs at most once. A network or decoding failure counts as an
empty result for that step, so it falls through to the next one.
"""

from __future__ import annotations

import logging

import requests

from inat_gallery.datasources.inaturalist import client
from inat_gallery.datasources.inaturalist.models import (
    EmptyNameError,
    NotFound,
    ProvisionalName,
    Resolution,
    StandardTaxonomy,
)
from inat_gallery.schemas import ObservationsResponse

logger = logging.getLogger(__name__)

QUOTE_CHARS = ("'", '"')

# Failures that degrade a step to "no results".
_SOFT_ERRORS = (requests.RequestException, ValueError)


def is_provisional_name(name: str) -> bool:
    """Quoted names are provisional and are never valid standard taxa."""
    return any(q in name for q in QUOTE_CHARS)


def lookup_taxon_id(name: str) -> int | None:
    """First taxon id the standard taxonomy search returns for ``name``."""
    try:
        taxa = client.search_taxa(name)
    except _SOFT_ERRORS as exc:
        logger.debug("Taxon search failed for %r: %s", name, exc)
        return None
    return taxa.first_id


def _fetch(params: dict[str, object], step: str) -> ObservationsResponse | None:
    try:
        data = client.get_observations(params)
    except _SOFT_ERRORS as exc:
        logger.debug("%s observation search failed: %s", step, exc)
        return None
    if not data.results:
        logger.debug("%s observation search returned no results", step)
        return None
    return data


def fetch_standard_observations(taxon_id: int) -> ObservationsResponse | None:
    """Sequenced observations of ``taxon_id``, or None if there are none."""
    return _fetch(client.standard_observation_params(taxon_id), "Standard taxonomy")


def fetch_provisional_observations(name: str) -> ObservationsResponse | None:
    """Observations tagged with provisional name ``name``, or None."""
    return _fetch(client.provisional_observation_params(name), "Provisional name")


def _resolution(
    name: str, strategy: StandardTaxonomy | ProvisionalName, data: ObservationsResponse
) -> Resolution:
    total = data.total_results if data.total_results is not None else len(data.results)
    return Resolution(
        query=name,
        strategy=strategy,
        observations=list(data.results),
        total_results=total,
    )


def resolve(name: str) -> Resolution | NotFound:
    """
    Find observations for a species name.

    Args:
        name: Species name, already defaulted by the caller.

    Returns:
        A ``Resolution`` naming the strategy that produced results, or
        ``NotFound`` when both paths are empty.

    Raises:
        EmptyNameError: If ``name`` is empty or blank.
    """
    if not name or not name.strip():
        raise EmptyNameError()

    if is_provisional_name(name):
        logger.debug("Name %r is quoted; using provisional name search only", name)
    else:
        logger.debug("Standard taxonomy search for %r", name)
        taxon_id = lookup_taxon_id(name)
        if taxon_id is not None:
            data = fetch_standard_observations(taxon_id)
            if data is not None:
                standard = StandardTaxonomy(taxon_id)
                logger.info("Resolved %r via %s", name, standard.label)
                return _resolution(name, standard, data)
        logger.debug("Falling back to provisional name search for %r", name)

    data = fetch_provisional_observations(name)
    if data is None:
        logger.info("No observations found for %r", name)
        return NotFound(query=name)

    provisional = ProvisionalName(name)
    logger.info("Resolved %r via %s", name, provisional.label)
    return _resolution(name, provisional, data)
