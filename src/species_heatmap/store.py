"""Flat per-species point files.

Each species gets one file, ``<base_dir>/<slug>.json``, holding a bare JSON
array of points (no metadata envelope) so a map page can load it directly.
Files are overwritten on every run; nothing is merged or appended.

Output is compact and key-ordered, so identical inputs produce
byte-identical files.
"""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003 — used at runtime, not just annotations
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from species_heatmap.schemas import Point, Species


class PointStore:
    """Reads and writes per-species point files under a base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def path_for(self, species: Species) -> Path:
        """Output path for a species (the file may not exist yet)."""
        return self._resolve(f"{species.slug}.json")

    def write(self, species: Species, points: Iterable[Point]) -> Path:
        """Write a species' points, replacing any previous file.

        Creates the base directory (and parents) if needed.

        Returns:
            Path of the written file.
        """
        full = self.path_for(species)
        full.parent.mkdir(parents=True, exist_ok=True)
        payload = [p.to_dict() for p in points]
        with full.open("w") as f:
            json.dump(payload, f, separators=(",", ":"))
        return full

    def read(self, species: Species) -> list[dict[str, Any]] | None:
        """Read a species' points back, or None if no file was written."""
        full = self.path_for(species)
        if not full.exists():
            return None
        with full.open() as f:
            result: list[dict[str, Any]] = json.load(f)
        return result

    def exists(self, species: Species) -> bool:
        return self.path_for(species).exists()

    def _resolve(self, name: str) -> Path:
        full = self.base / name
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {name}"
            raise ValueError(msg) from None
        return full
