"""
Prefect flow for fetching species occurrence points from GBIF.

Species are processed one at a time, with a politeness pause between them.
A species that fails is logged and skipped; the run always reaches the end.

Run locally:
    python -m species_heatmap.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m species_heatmap.flows.fetch
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NONE

from species_heatmap.config import FetchConfig
from species_heatmap.datasources import gbif
from species_heatmap.reference.species import DEFAULT_SPECIES
from species_heatmap.schemas import Point, Species, SpeciesResult
from species_heatmap.store import PointStore

# Default output location (served by the map front-end)
store = PointStore(Path("public/data"))


@task(name="fetch-species-points", cache_policy=NONE)
def fetch_species_points(species: Species, config: FetchConfig) -> SpeciesResult:
    """Sample one species' occurrence points from GBIF."""
    return gbif.sample_species(species, config)


@task(name="save-points", cache_policy=NONE)
def save_points(species: Species, points: list[Point], point_store: PointStore) -> Path:
    """Write a species' points, even when there are none."""
    return point_store.write(species, points)


@flow(name="fetch-heatmap-data", log_prints=True)
def fetch_all(
    species: list[Species] | None = None,
    config: FetchConfig | None = None,
    output_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Fetch and save points for every species.

    Args:
        species: Species to process (default: the built-in list).
        config: Paging/sampling/retry parameters (default: ``FetchConfig()``).
        output_dir: Directory for the per-species files (default: ``store``).

    Returns:
        Summary dict: species processed, slugs written, slugs failed, total
        points, and slugs whose sample stopped early on a failed request.
    """
    species_list = list(species) if species is not None else list(DEFAULT_SPECIES)
    config = config or FetchConfig()
    point_store = PointStore(output_dir) if output_dir is not None else store

    written: list[str] = []
    failed: list[str] = []
    partial: list[str] = []
    total_points = 0

    mode = "stratified by decade" if config.stratify else "flat"
    print(f"Fetching {len(species_list)} species ({mode}) into {point_store.base}")

    for i, sp in enumerate(species_list):
        if i and config.species_delay > 0:
            time.sleep(config.species_delay)

        print(f"Fetching data for {sp.common_name}...")
        try:
            result = fetch_species_points(sp, config)
            path = save_points(sp, result.points, point_store)
        except Exception as exc:  # noqa: BLE001 — one species never aborts the run
            print(f"FAILED to fetch data for {sp.common_name}: {exc!r}")
            failed.append(sp.slug)
            continue

        written.append(sp.slug)
        total_points += len(result.points)
        if result.partial:
            partial.append(sp.slug)
            print(f"Partial sample for {sp.common_name}: {'; '.join(result.errors)}")
        print(f"Saved {len(result.points)} points for {sp.common_name} to {path}")

    print(
        f"All species processed: {len(written)} written, {len(failed)} failed, "
        f"{total_points} points."
    )
    return {
        "species": len(species_list),
        "written": written,
        "failed": failed,
        "partial": partial,
        "points": total_points,
    }


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
