"""Species Heatmap - per-species GBIF occurrence samples for map visualisation.

Architecture::

    reference/     Static inputs (species list, decade buckets)
    services/      Shared utilities (HTTP session, retry wrapper, logging)
    datasources/   External APIs (GBIF occurrence search, pagination, sampling)
    store.py       One flat JSON file of points per species
    flows/         Prefect orchestration (fetch every species, write its file)

Data flow: reference species → datasources (page, filter, sample) → store

Extension points — see each package's docstring:
  - New data source:   datasources/__init__.py
  - New reference set: reference/__init__.py
"""

__version__ = "0.1.0"

from species_heatmap.config import FetchConfig, Settings
from species_heatmap.schemas import Point, SamplingBucket, Species

__all__ = ["FetchConfig", "Point", "SamplingBucket", "Settings", "Species", "__version__"]
