"""Pure rendering functions: gallery model -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclass from ``datasources.inaturalist.models``
  - Output: str (HTML fragment, not a full page, except ``build_page_html``)
  - No side effects, no I/O, no Prefect decorators

Every fragment takes a ``gallery_id`` from the caller. It namespaces DOM ids
so several galleries can share one page.

Public API:
  - gallery: build_gallery_html, build_not_found_html, build_error_html, build_page_html
  - observation_map: build_observation_map_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
