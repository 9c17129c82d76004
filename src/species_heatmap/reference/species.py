"""Species list loading.

The species list is a JSON array of ``{"commonName", "scientificName"}``
objects.  ``DEFAULT_SPECIES`` is used when no file is given.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from species_heatmap.schemas import Species

if TYPE_CHECKING:
    from pathlib import Path

_SPECIES_LIST = TypeAdapter(list[Species])

DEFAULT_SPECIES: tuple[Species, ...] = (
    Species(common_name="Monarch Butterfly", scientific_name="Danaus plexippus"),
    Species(common_name="Painted Lady", scientific_name="Vanessa cardui"),
    Species(common_name="Arctic Tern", scientific_name="Sterna paradisaea"),
    Species(common_name="Barn Swallow", scientific_name="Hirundo rustica"),
    Species(common_name="Osprey", scientific_name="Pandion haliaetus"),
    Species(common_name="Humpback Whale", scientific_name="Megaptera novaeangliae"),
    Species(common_name="Leatherback Sea Turtle", scientific_name="Dermochelys coriacea"),
    Species(common_name="Red Fox", scientific_name="Vulpes vulpes"),
    Species(common_name="Common Dandelion", scientific_name="Taraxacum officinale"),
    Species(common_name="Fly Agaric", scientific_name="Amanita muscaria"),
)


def load_species(path: Path) -> list[Species]:
    """
    Read and validate a species list file.

    Raises:
        ValueError: If the file isn't a JSON array, or lists the same
            scientific name twice (both would write the same output file).
        pydantic.ValidationError: If an entry is missing a name.
    """
    with path.open() as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        msg = f"Species file must contain a JSON array: {path}"
        raise ValueError(msg)

    species = _SPECIES_LIST.validate_python(raw)

    seen: set[str] = set()
    for s in species:
        if s.slug in seen:
            msg = f"Duplicate species in {path}: {s.scientific_name}"
            raise ValueError(msg)
        seen.add(s.slug)
    return species
