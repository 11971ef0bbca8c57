# models/species.py
"""
Data models for the marine species catalog.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .base import ToDictMixin

# API endpoints
WORMS_VERNACULAR_URL = "https://www.marinespecies.org/rest/AphiaRecordsByVernacular"
OBIS_CHECKLIST_URL = "https://api.obis.org/v3/checklist"
FISHBASE_SPECIES_URL = "https://fishbase.ropensci.org/species"

UNKNOWN = "Unknown"

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert camelCase keys (front-end JSON) to snake_case."""
    return {_CAMEL_RE.sub("_", key).lower(): value for key, value in data.items()}


def slugify(name: str) -> str:
    """Build a stable record id from a scientific name."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "unknown-species"


@dataclass
class Range(ToDictMixin):
    """A numeric interval with a unit, e.g. a depth or length range."""

    min: float
    max: float
    unit: str = "meters"

    def __post_init__(self):
        if self.min > self.max:
            self.min, self.max = self.max, self.min

    def overlaps(self, low: float, high: float) -> bool:
        """True when [min, max] overlaps [low, high]."""
        return self.max >= low and self.min <= high

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_unit: str = "meters") -> "Range":
        return cls(
            min=float(data.get("min", 0)),
            max=float(data.get("max", 0)),
            unit=data.get("unit", default_unit),
        )


@dataclass
class SizeInfo(ToDictMixin):
    """Body length and optional weight ranges."""

    length: Range
    weight: Optional[Range] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SizeInfo":
        weight = data.get("weight")
        return cls(
            length=Range.from_dict(data.get("length", {})),
            weight=Range.from_dict(weight, default_unit="kg") if weight else None,
        )


@dataclass
class SpeciesRecord(ToDictMixin):
    """
    A complete species entry in the catalog.

    Attributes:
        id: Unique key within the catalog.
        scientific_name: Binomial name (Genus species).
        common_name: Common English name.
        family, order, phylum, kingdom: Taxonomy, "Unknown" when not known.
        habitat: Habitat labels.
        depth: Depth range the species is found at.
        distribution: Region labels.
        conservation_status: IUCN-like classification.
        size: Length and optional weight ranges.
        diet: Food source labels.
        lifespan: Typical lifespan in years.
        description: Narrative description.
        images: Reference image URIs.
        facts: Ordered list of facts.
        threats: Known threats.
        discovery_year: Year of formal description, if known.
        discovery_location: Location of formal description, if known.
        sources: Originating database names.
        last_updated: ISO date of the last update.
    """

    id: str
    scientific_name: str
    common_name: str
    family: str
    order: str
    phylum: str
    kingdom: str
    habitat: List[str]
    depth: Range
    distribution: List[str]
    conservation_status: str
    size: SizeInfo
    diet: List[str]
    lifespan: float
    description: str
    images: List[str] = field(default_factory=list)
    facts: List[str] = field(default_factory=list)
    threats: List[str] = field(default_factory=list)
    discovery_year: Optional[int] = None
    discovery_location: Optional[str] = None
    sources: List[str] = field(default_factory=list)
    last_updated: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpeciesRecord":
        """Create a record from a snake_case or camelCase dictionary."""
        d = _snake_keys(data)
        return cls(
            id=d["id"],
            scientific_name=d["scientific_name"],
            common_name=d.get("common_name", UNKNOWN),
            family=d.get("family", UNKNOWN),
            order=d.get("order", UNKNOWN),
            phylum=d.get("phylum", UNKNOWN),
            kingdom=d.get("kingdom", UNKNOWN),
            habitat=list(d.get("habitat", [])),
            depth=Range.from_dict(d.get("depth", {})),
            distribution=list(d.get("distribution", [])),
            conservation_status=d.get("conservation_status", UNKNOWN),
            size=SizeInfo.from_dict(d.get("size", {})),
            diet=list(d.get("diet", [])),
            lifespan=d.get("lifespan", 10),
            description=d.get("description", ""),
            images=list(d.get("images", [])),
            facts=list(d.get("facts", [])),
            threats=list(d.get("threats", [])),
            discovery_year=d.get("discovery_year"),
            discovery_location=d.get("discovery_location"),
            sources=list(d.get("sources", [])),
            last_updated=d.get("last_updated", ""),
        )


@dataclass
class PartialSpeciesRecord(ToDictMixin):
    """
    A species record as read from a single upstream source.

    Only scientific_name and source are guaranteed. Every other field is
    None when the source did not provide it; normalize_partial() turns a
    partial record into a SpeciesRecord.
    """

    scientific_name: str
    source: str
    common_name: Optional[str] = None
    family: Optional[str] = None
    order: Optional[str] = None
    phylum: Optional[str] = None
    kingdom: Optional[str] = None
    habitat: Optional[List[str]] = None
    depth: Optional[Range] = None
    distribution: Optional[List[str]] = None
    conservation_status: Optional[str] = None
    length: Optional[Range] = None
    weight: Optional[Range] = None
    diet: Optional[List[str]] = None
    lifespan: Optional[float] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    facts: Optional[List[str]] = None
    threats: Optional[List[str]] = None
    discovery_year: Optional[int] = None
    discovery_location: Optional[str] = None


@dataclass
class SearchCriteria(ToDictMixin):
    """Filters for advanced search. Omitted (None/empty) criteria impose no constraint."""

    name: Optional[str] = None
    habitat: Optional[str] = None
    conservation_status: Optional[str] = None
    min_depth: Optional[float] = None
    max_depth: Optional[float] = None
    diet: Optional[str] = None

    @property
    def has_depth_range(self) -> bool:
        # Both bounds are required; a single bound is ignored.
        return self.min_depth is not None and self.max_depth is not None

    def is_empty(self) -> bool:
        return not (
            self.name
            or self.habitat
            or self.conservation_status
            or self.diet
            or self.min_depth is not None
            or self.max_depth is not None
        )


@dataclass
class CatalogStatistics(ToDictMixin):
    """
    Aggregate statistics over the catalog.

    average_lifespan is None when the catalog is empty.
    """

    total_species: int
    conservation_counts: Dict[str, int]
    habitat_counts: Dict[str, int]
    average_lifespan: Optional[float]
    last_updated: Optional[str] = None
    sources: List[str] = field(default_factory=list)


@dataclass
class SourceReport(ToDictMixin):
    """Outcome of one upstream source during the last refresh."""

    name: str
    record_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CacheEnvelope(ToDictMixin):
    """The merged species collection with its fetch time and contributing sources."""

    species: List[SpeciesRecord]
    last_updated: float
    sources: List[str] = field(default_factory=list)

    def is_valid(self, now: float, ttl_seconds: float) -> bool:
        return 0 <= now - self.last_updated < ttl_seconds

    @property
    def last_updated_iso(self) -> str:
        return datetime.fromtimestamp(self.last_updated, tz=timezone.utc).isoformat(
            timespec="seconds"
        )
