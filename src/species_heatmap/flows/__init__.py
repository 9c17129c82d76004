"""
Prefect flows for the data pipeline.

Flows:
- fetch: Sample GBIF occurrences for every species and write one file each

Usage (local):
    python -m species_heatmap.flows.fetch
    species-heatmap fetch --stratify

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m species_heatmap.flows.fetch
"""
