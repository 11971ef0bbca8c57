"""Marine species catalog: store, multi-source aggregator and upstream sources."""

from .aggregator import DEFAULT_TTL_SECONDS, MultiSourceAggregator
from .builtin import load_builtin_catalog
from .normalize import build_collection, merge_partials, normalize_partial
from .sources import FishBaseSource, OBISSource, SpeciesSource, WoRMSSource
from .store import SpeciesCatalogStore

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "FishBaseSource",
    "MultiSourceAggregator",
    "OBISSource",
    "SpeciesCatalogStore",
    "SpeciesSource",
    "WoRMSSource",
    "build_collection",
    "load_builtin_catalog",
    "merge_partials",
    "normalize_partial",
]
