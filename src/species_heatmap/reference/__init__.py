"""Static inputs that don't change with API calls.

Species lists and the sampling buckets used for stratified runs.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/loaders
2. Re-export from this ``__init__.py``
"""

from species_heatmap.reference.decades import ALL_YEARS as ALL_YEARS
from species_heatmap.reference.decades import DECADES as DECADES
from species_heatmap.reference.species import DEFAULT_SPECIES as DEFAULT_SPECIES
from species_heatmap.reference.species import load_species as load_species
