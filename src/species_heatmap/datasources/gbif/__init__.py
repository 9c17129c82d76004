"""GBIF occurrence data source.

Pages through the GBIF occurrence search API, filters records down to
plottable points and assembles a bounded sample per species, optionally
stratified by decade.

Public API:
  - client: OccurrencePage, search_occurrences (one page, with retry)
  - occurrences: parse_point, filter_points, BucketSample, fetch_bucket_points
  - sampling: sample_species
"""

from species_heatmap.datasources.gbif.client import (
    OCCURRENCE_SEARCH,
    OccurrencePage,
    search_occurrences,
)
from species_heatmap.datasources.gbif.occurrences import (
    BucketSample,
    fetch_bucket_points,
    filter_points,
    parse_point,
)
from species_heatmap.datasources.gbif.sampling import sample_species

__all__ = [
    "OCCURRENCE_SEARCH",
    "BucketSample",
    "OccurrencePage",
    "fetch_bucket_points",
    "filter_points",
    "parse_point",
    "sample_species",
    "search_occurrences",
]
