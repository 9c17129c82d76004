"""Tests for species list loading."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from species_heatmap.reference import DEFAULT_SPECIES, load_species

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "species.json"
    path.write_text(json.dumps(data))
    return path


class TestDefaultSpecies:
    """Test the built-in list."""

    def test_not_empty(self) -> None:
        assert len(DEFAULT_SPECIES) > 0

    def test_unique_slugs(self) -> None:
        slugs = [s.slug for s in DEFAULT_SPECIES]
        assert len(slugs) == len(set(slugs))


class TestLoadSpecies:
    """Test reading species files."""

    def test_loads_entries(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            [
                {"commonName": "Test Bird", "scientificName": "Testus birdus"},
                {"commonName": "Other Bird", "scientificName": "Alterus birdus"},
            ],
        )
        species = load_species(path)
        assert [s.slug for s in species] == ["testus-birdus", "alterus-birdus"]

    def test_not_an_array(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"commonName": "Test Bird", "scientificName": "Testus birdus"})
        with pytest.raises(ValueError, match="JSON array"):
            load_species(path)

    def test_missing_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path, [{"commonName": "Test Bird"}])
        with pytest.raises(ValidationError):
            load_species(path)

    def test_duplicate_rejected(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            [
                {"commonName": "Test Bird", "scientificName": "Testus birdus"},
                {"commonName": "Test Bird Again", "scientificName": "testus Birdus"},
            ],
        )
        with pytest.raises(ValueError, match="Duplicate"):
            load_species(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_species(tmp_path / "nope.json")
