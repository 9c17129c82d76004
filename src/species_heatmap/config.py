"""
Application settings.

``Settings`` reads environment variables (prefix ``SPECIES_HEATMAP_``) and an
optional ``.env`` file.  The fetch tunables are handed to the sampler as an
explicit ``FetchConfig`` so a run never reads global state.

Example::

    SPECIES_HEATMAP_STRATIFY=true SPECIES_HEATMAP_DECADE_TARGET=100 species-heatmap fetch
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from species_heatmap.datasources.gbif.client import MAX_LIMIT
from species_heatmap.reference.decades import ALL_YEARS, DECADES

if TYPE_CHECKING:
    from species_heatmap.schemas import SamplingBucket


class FetchConfig(BaseModel):
    """Paging, sampling and retry parameters for one run."""

    model_config = ConfigDict(frozen=True)

    page_size: int = Field(default=MAX_LIMIT, gt=0, le=MAX_LIMIT)
    target: int = Field(default=1000, ge=0, description="Point quota for flat runs")
    decade_target: int = Field(default=200, ge=0, description="Point quota per decade")
    max_attempts: int = Field(default=5, ge=1)
    retry_delay: float = Field(default=5.0, ge=0, description="Seconds between attempts")
    page_delay: float = Field(default=0.5, ge=0, description="Seconds between pages")
    species_delay: float = Field(default=1.0, ge=0, description="Seconds between species")
    stratify: bool = False
    year_aware: bool = False
    max_offset: int = Field(default=100_000, gt=0, description="GBIF paging ceiling")

    @property
    def include_year(self) -> bool:
        """Stratified samples always carry the year they were bucketed by."""
        return self.year_aware or self.stratify

    def buckets(self) -> tuple[SamplingBucket, ...]:
        return DECADES if self.stratify else (ALL_YEARS,)

    def bucket_target(self) -> int:
        return self.decade_target if self.stratify else self.target


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIES_HEATMAP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "species-heatmap"
    app_env: str = "development"
    debug: bool = False

    output_dir: Path = Path("public/data")
    species_file: Path | None = None

    page_size: int = 300
    target: int = 1000
    decade_target: int = 200
    max_attempts: int = 5
    retry_delay: float = 5.0
    page_delay: float = 0.5
    species_delay: float = 1.0
    stratify: bool = False
    year_aware: bool = False

    def fetch_config(self, **overrides: object) -> FetchConfig:
        """Build the per-run ``FetchConfig``; ``None`` overrides are ignored."""
        values: dict[str, object] = {
            "page_size": self.page_size,
            "target": self.target,
            "decade_target": self.decade_target,
            "max_attempts": self.max_attempts,
            "retry_delay": self.retry_delay,
            "page_delay": self.page_delay,
            "species_delay": self.species_delay,
            "stratify": self.stratify,
            "year_aware": self.year_aware,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return FetchConfig.model_validate(values)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
