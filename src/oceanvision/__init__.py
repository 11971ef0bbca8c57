"""
OceanVision - Marine Species Catalog
====================================

Version: 0.1.0
"""

__version__ = "0.1.0"

from oceanvision.core.catalog import MultiSourceAggregator, SpeciesCatalogStore
from oceanvision.models.species import SearchCriteria, SpeciesRecord

__all__ = [
    "__version__",
    "MultiSourceAggregator",
    "SearchCriteria",
    "SpeciesCatalogStore",
    "SpeciesRecord",
]
