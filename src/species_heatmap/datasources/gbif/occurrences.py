"""Occurrence parsing and the offset pagination loop."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from species_heatmap.datasources.gbif import client
from species_heatmap.schemas import Point, SamplingBucket, Species
from species_heatmap.services.http import RetryExhaustedError
from species_heatmap.services.log import get_log

if TYPE_CHECKING:
    from collections.abc import Iterable

    from species_heatmap.config import FetchConfig

# Records attributed to Antarctica are never plotted.
EXCLUDED_COUNTRY_CODES = frozenset({"AQ"})

# =============================================================================
# Parsing
# =============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)


def parse_point(record: dict[str, Any], *, include_year: bool = False) -> Point | None:
    """
    Turn one occurrence record into a Point.

    Returns None if coordinates are missing, non-numeric or out of range, the
    record is from an excluded country, or ``include_year`` is set and the
    record has no integer ``year``.
    """
    if record.get("countryCode") in EXCLUDED_COUNTRY_CODES:
        return None

    lat = record.get("decimalLatitude")
    lng = record.get("decimalLongitude")
    if not (_is_number(lat) and _is_number(lng)):
        return None

    year: int | None = None
    if include_year:
        raw_year = record.get("year")
        if not isinstance(raw_year, int) or isinstance(raw_year, bool):
            return None
        year = raw_year

    try:
        return Point(lat=lat, lng=lng, year=year)
    except ValidationError:
        return None


def filter_points(records: Iterable[dict[str, Any]], *, include_year: bool = False) -> list[Point]:
    """Parse a page of records, dropping the ones that can't be plotted."""
    points: list[Point] = []
    for record in records:
        point = parse_point(record, include_year=include_year)
        if point is not None:
            points.append(point)
    return points


# =============================================================================
# Pagination
# =============================================================================


@dataclass
class BucketSample:
    """Points gathered for one species within one sampling bucket."""

    bucket: SamplingBucket
    points: list[Point] = field(default_factory=list)
    pages: int = 0
    stop_reason: str = ""
    error: str | None = None


def _subject(species: Species, bucket: SamplingBucket) -> str:
    if bucket.year_filter is None:
        return species.common_name
    return f"{species.common_name} ({bucket.name})"


def fetch_bucket_points(
    species: Species,
    bucket: SamplingBucket,
    target: int,
    config: FetchConfig,
) -> BucketSample:
    """
    Page through a species' occurrences in one bucket until ``target`` points.

    Requests ``config.page_size`` records per page at increasing offsets.
    After each page, stops when the API reports ``endOfRecords``, the page is
    shorter than requested, the target is reached, or the next offset would
    pass GBIF's paging ceiling.  A request that exhausts its retries ends the
    bucket without raising; points gathered so far are kept.

    Records are de-duplicated by GBIF ``key``, since offsets can shift while
    the index updates between pages.

    Returns:
        BucketSample with at most ``target`` points.
    """
    log = get_log(__name__)
    subject = _subject(species, bucket)
    sample = BucketSample(bucket=bucket)
    seen_keys: set[Any] = set()
    offset = 0

    while len(sample.points) < target:
        if sample.pages and config.page_delay > 0:
            time.sleep(config.page_delay)
        try:
            page = client.search_occurrences(
                species.scientific_name,
                limit=config.page_size,
                offset=offset,
                year=bucket.year_filter,
                subject=subject,
                config=config,
            )
        except RetryExhaustedError as exc:
            log.error("Stopping %s after %d pages: %s", subject, sample.pages, exc)
            sample.error = str(exc)
            sample.stop_reason = "error"
            break

        sample.pages += 1
        fresh: list[dict[str, Any]] = []
        for record in page.results:
            key = record.get("key")
            if key is not None:
                if key in seen_keys:
                    continue
                seen_keys.add(key)
            fresh.append(record)
        new_points = filter_points(fresh, include_year=config.include_year)
        sample.points.extend(new_points)
        log.debug(
            "%s offset %d: %d records (of %s), %d valid, %d total",
            subject,
            offset,
            len(page.results),
            page.count if page.count is not None else "?",
            len(new_points),
            len(sample.points),
        )

        offset += config.page_size
        if page.end_of_records:
            sample.stop_reason = "end_of_records"
            break
        if len(page.results) < config.page_size:
            sample.stop_reason = "short_page"
            break
        if offset + config.page_size > config.max_offset:
            sample.stop_reason = "max_offset"
            break
    else:
        sample.stop_reason = "target"

    del sample.points[target:]
    return sample
