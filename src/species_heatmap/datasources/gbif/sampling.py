"""Per-species sampling across year buckets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from species_heatmap.datasources.gbif.occurrences import fetch_bucket_points
from species_heatmap.schemas import Point, SpeciesResult
from species_heatmap.services.log import get_log

if TYPE_CHECKING:
    from species_heatmap.config import FetchConfig
    from species_heatmap.schemas import Species


def sample_species(species: Species, config: FetchConfig) -> SpeciesResult:
    """
    Assemble a bounded sample of points for one species.

    Runs the pagination loop once per bucket in ``config.buckets()`` — the
    decades when stratifying, otherwise a single all-years bucket — each with
    its own quota, and concatenates the results in bucket order.  Drawing a
    quota per decade spreads the sample over time instead of following the
    API's result order.

    A bucket that hits a failed request contributes what it had; the error is
    recorded on the result and the remaining buckets still run.
    """
    log = get_log(__name__)
    target = config.bucket_target()
    points: list[Point] = []
    per_bucket: dict[str, int] = {}
    errors: list[str] = []

    for bucket in config.buckets():
        sample = fetch_bucket_points(species, bucket, target, config)
        points.extend(sample.points)
        per_bucket[bucket.name] = len(sample.points)
        if sample.error is not None:
            errors.append(f"{bucket.name}: {sample.error}")
        log.info(
            "%s [%s]: %d points from %d pages (%s)",
            species.common_name,
            bucket.name,
            len(sample.points),
            sample.pages,
            sample.stop_reason,
        )

    return SpeciesResult(species=species, points=points, per_bucket=per_bucket, errors=errors)
