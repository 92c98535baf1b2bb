"""
Prefect flows.

Flows:
- build: Resolve species names and write one static gallery page each

Usage (local):
    python -m inat_gallery.flows.build "Amanita muscaria" "Psathyrella 'alluvinana PNW10'"

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    inat-gallery build "Amanita muscaria"
"""
