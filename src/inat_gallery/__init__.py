"""iNaturalist Gallery - species photo galleries and observation maps.

Architecture::

    datasources/   iNaturalist API (client, resolver, normalizer, models)
    schemas.py     pydantic models for the API response shapes we consume
    pipeline.py    Inbound interface: species name -> GalleryResult | NotFound
    renderers/     Pure data -> HTML (gallery grid, lightbox, Leaflet map)
    flows/         Prefect orchestration (build static gallery pages)
    services/      Shared utilities (HTTP session)

Data flow: name -> resolver (taxonomy, then provisional name) -> normalizer
-> renderers -> HTML fragment or site/ page.
"""

__version__ = "0.1.0"
__author__ = "Matej Franceskin"

from inat_gallery.config import Settings

__all__ = ["Settings", "__version__"]
