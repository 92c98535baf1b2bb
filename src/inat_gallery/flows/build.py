"""
Prefect flow for building static gallery pages.

Each species name becomes ``<site_dir>/<slug>.html``; an ``index.html`` links
them all.

Run locally:
    python -m inat_gallery.flows.build "Amanita muscaria"
"""

from __future__ import annotations

import re
import sys
import uuid
from pathlib import Path
from typing import Any

from prefect import flow, task

from inat_gallery.config import get_settings
from inat_gallery.datasources.inaturalist.models import GalleryResult, NotFound
from inat_gallery.pipeline import resolve_and_fetch, species_name_from
from inat_gallery.renderers import render_template
from inat_gallery.renderers.gallery import (
    build_gallery_html,
    build_not_found_html,
    build_page_html,
)


def slugify(name: str) -> str:
    """File-name-safe slug, e.g. ``Psathyrella 'alluvinana PNW10'`` -> ``psathyrella-alluvinana-pnw10``."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "gallery"


def unique_slug(name: str, used: set[str]) -> str:
    """Slug for ``name`` not yet in ``used``; repeats get ``-2``, ``-3``, ... suffixes."""
    base = slugify(name)
    slug = base
    n = 2
    while slug in used:
        slug = f"{base}-{n}"
        n += 1
    used.add(slug)
    return slug


def new_gallery_id() -> str:
    """Fresh DOM namespace for one rendered gallery."""
    return f"inat-gallery-{uuid.uuid4().hex[:12]}"


# =============================================================================
# Tasks
# =============================================================================


@task(name="fetch-gallery")
def fetch_gallery(name: str) -> GalleryResult | NotFound:
    """Resolve a species name and normalize its observations."""
    return resolve_and_fetch(name)


@task(name="render-gallery-page")
def render_gallery_page(
    name: str,
    result: GalleryResult | NotFound,
    gallery_id: str,
    display_limit: int,
) -> str:
    """Render a standalone page for one species."""
    if isinstance(result, NotFound):
        body = build_not_found_html(result.query)
    else:
        body = build_gallery_html(result, gallery_id, display_limit=display_limit)
    return build_page_html(name, body)


@task(name="write-page")
def write_page(site_dir: Path, filename: str, html: str) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / filename
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-galleries", log_prints=True)
def build_galleries(species_names: list[str], site_dir: Path | None = None) -> dict[str, Any]:
    """
    Build one gallery page per species name plus an index.

    Names are processed one at a time. Blank names are skipped.
    """
    settings = get_settings()
    site_dir = site_dir or settings.site_dir

    pages: list[dict[str, Any]] = []
    # "index" is reserved for the index page
    used_slugs = {"index"}
    for raw_name in species_names:
        name = species_name_from(raw_name)
        if not name:
            print(f"Skipping empty species name: {raw_name!r}")
            continue

        print(f"Fetching observations for {name}...")
        result = fetch_gallery(name)
        found = False
        if isinstance(result, GalleryResult):
            found = True
            print(f"  {result.found_by.label}: {result.total_results} results")
        else:
            print("  No observations found.")

        html = render_gallery_page(name, result, new_gallery_id(), settings.display_limit)
        filename = f"{unique_slug(name, used_slugs)}.html"
        write_page(site_dir, filename, html)
        pages.append({"name": name, "filename": filename, "found": found})

    index_html = build_page_html(
        "iNaturalist galleries",
        render_template("index.html.j2", pages=pages),
    )
    index_path = write_page(site_dir, "index.html", index_html)

    print(f"Site built: {index_path}")
    return {
        "pages": len(pages),
        "found": sum(1 for p in pages if p["found"]),
        "output": str(index_path),
    }


if __name__ == "__main__":
    result = build_galleries(sys.argv[1:])
    print(f"Flow complete: {result}")
