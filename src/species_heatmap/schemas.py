"""
Domain models for species heatmap.

Pydantic models for the species list, API-derived points and sampling
buckets.  These define the canonical schema - datasources normalize GBIF
responses to these before anything is written to disk.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Species
# =============================================================================


class Species(BaseModel):
    """A species to fetch, as listed in the species file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    common_name: str = Field(..., alias="commonName", min_length=1)
    scientific_name: str = Field(..., alias="scientificName", min_length=1)

    @property
    def slug(self) -> str:
        """File-name stem: lower-cased scientific name, spaces → hyphens."""
        return self.scientific_name.lower().replace(" ", "-")

    @property
    def display_name(self) -> str:
        return f"{self.common_name} ({self.scientific_name})"


# =============================================================================
# Points
# =============================================================================


class Point(BaseModel):
    """A single occurrence location, the unit of output."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    year: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the output file; ``year`` only when known."""
        data: dict[str, Any] = {"lat": self.lat, "lng": self.lng}
        if self.year is not None:
            data["year"] = self.year
        return data


# =============================================================================
# Sampling
# =============================================================================


class SamplingBucket(BaseModel):
    """A year range sampled independently. No bounds means all years."""

    model_config = ConfigDict(frozen=True)

    name: str
    year_low: int | None = None
    year_high: int | None = None

    @model_validator(mode="after")
    def _check_range(self) -> SamplingBucket:
        if (self.year_low is None) != (self.year_high is None):
            msg = f"Bucket {self.name!r} needs both year_low and year_high, or neither"
            raise ValueError(msg)
        if (
            self.year_low is not None
            and self.year_high is not None
            and self.year_low > self.year_high
        ):
            msg = f"Bucket {self.name!r}: year_low {self.year_low} > year_high {self.year_high}"
            raise ValueError(msg)
        return self

    @property
    def year_filter(self) -> str | None:
        """GBIF ``year`` query value (``"low,high"``), or None when unbounded."""
        if self.year_low is None:
            return None
        return f"{self.year_low},{self.year_high}"


class SpeciesResult(BaseModel):
    """Outcome of sampling one species."""

    species: Species
    points: list[Point] = Field(default_factory=list)
    per_bucket: dict[str, int] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when at least one bucket stopped on an exhausted fetch."""
        return bool(self.errors)
