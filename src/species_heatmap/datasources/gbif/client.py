"""
GBIF occurrence search client.

Low-level request building for ``/occurrence/search``.  Retries are handled
by ``services.http.fetch_json_with_retry``; paging lives in ``occurrences``.

API docs: https://techdocs.gbif.org/en/openapi/v1/occurrence
Paging: ``limit`` max 300, ``offset + limit`` must stay under 100,000.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from species_heatmap.services.http import fetch_json_with_retry

if TYPE_CHECKING:
    from species_heatmap.config import FetchConfig

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.gbif.org/v1"
OCCURRENCE_SEARCH = f"{API_BASE}/occurrence/search"
MAX_LIMIT = 300  # API maximum page size


@dataclass
class OccurrencePage:
    """One page of ``/occurrence/search`` results."""

    results: list[dict[str, Any]] = field(default_factory=list)
    end_of_records: bool = False
    count: int | None = None


def parse_page(data: dict[str, Any]) -> OccurrencePage:
    """Normalize a raw search response. Missing ``results`` is an empty page."""
    results = data.get("results") or []
    return OccurrencePage(
        results=[r for r in results if isinstance(r, dict)],
        end_of_records=bool(data.get("endOfRecords", False)),
        count=data.get("count"),
    )


def search_occurrences(
    scientific_name: str,
    *,
    limit: int,
    offset: int,
    config: FetchConfig,
    year: str | None = None,
    subject: str | None = None,
) -> OccurrencePage:
    """
    GET /occurrence/search — one page of georeferenced records for a name.

    Args:
        scientific_name: Name to search (URL-encoded by requests).
        limit: Page size.
        offset: Index of the first record.
        config: Supplies the retry budget and delay.
        year: Optional ``"low,high"`` year range filter.
        subject: Label for log lines and errors (defaults to the name).

    Raises:
        RetryExhaustedError: If every attempt failed.
    """
    params: dict[str, Any] = {
        "scientificName": scientific_name,
        "limit": limit,
        "offset": offset,
        "hasCoordinate": "true",
    }
    if year is not None:
        params["year"] = year

    data = fetch_json_with_retry(
        OCCURRENCE_SEARCH,
        params,
        subject=subject or scientific_name,
        max_attempts=config.max_attempts,
        delay=config.retry_delay,
    )
    return parse_page(data)
