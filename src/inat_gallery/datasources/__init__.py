"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request/link builders
    ├── models.py         # Dataclasses for results
    └── {feature}.py      # Logic built on the client (resolver, normalizer)

Only ``inaturalist/`` exists today. Fetch functions go through
``inat_gallery.services.http.session`` so tests can patch one seam::

    from inat_gallery.services.http import session

    def fetch_something(name) -> dict[str, Any]:
        resp = session.get(API_URL, params={...})
        resp.raise_for_status()
        return resp.json()
"""
