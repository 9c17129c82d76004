"""Year buckets for stratified sampling."""

from __future__ import annotations

from species_heatmap.schemas import SamplingBucket

# Sampled newest first; each bucket gets its own quota.
DECADES: tuple[SamplingBucket, ...] = (
    SamplingBucket(name="2020s", year_low=2020, year_high=2029),
    SamplingBucket(name="2010s", year_low=2010, year_high=2019),
    SamplingBucket(name="2000s", year_low=2000, year_high=2009),
)

# Singleton bucket for flat (non-stratified) runs: no year filter.
ALL_YEARS = SamplingBucket(name="all")
