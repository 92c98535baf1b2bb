"""
Inbound interface: species name in, gallery model out.

Hosts (the CLI, the build flow) call ``species_name_from`` to apply the
default name, then ``resolve_and_fetch``.
"""

from __future__ import annotations

from inat_gallery.datasources.inaturalist import resolver
from inat_gallery.datasources.inaturalist.models import GalleryResult, NotFound
from inat_gallery.datasources.inaturalist.normalizer import normalize


def species_name_from(species: str | None, page_title: str | None = None) -> str:
    """
    Pick the name to search for.

    An explicit ``species`` wins, even an empty one; the page title is used
    only when ``species`` is None.
    Wiki-style underscores become spaces.
    """
    name = species if species is not None else page_title or ""
    return name.replace("_", " ").strip()


def resolve_and_fetch(name: str) -> GalleryResult | NotFound:
    """
    Resolve ``name`` and normalize whatever observations were found.

    Raises:
        EmptyNameError: If ``name`` is empty.
    """
    resolution = resolver.resolve(name)
    if isinstance(resolution, NotFound):
        return resolution
    return normalize(resolution)
