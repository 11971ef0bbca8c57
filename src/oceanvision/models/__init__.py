"""Data models for OceanVision."""

from oceanvision.models.base import ToDictMixin
from oceanvision.models.species import (
    CacheEnvelope,
    CatalogStatistics,
    PartialSpeciesRecord,
    Range,
    SearchCriteria,
    SizeInfo,
    SourceReport,
    SpeciesRecord,
)

__all__ = [
    "ToDictMixin",
    "CacheEnvelope",
    "CatalogStatistics",
    "PartialSpeciesRecord",
    "Range",
    "SearchCriteria",
    "SizeInfo",
    "SourceReport",
    "SpeciesRecord",
]
