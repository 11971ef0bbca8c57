"""
Partial-to-full record normalization.

Upstream sources each provide only some fields. normalize_partial() fills
every missing field with a fixed default so that any PartialSpeciesRecord,
however sparse, yields a structurally valid SpeciesRecord.
"""

from datetime import date
from typing import Iterable, List, Optional

from oceanvision.core.logger import get_logger
from oceanvision.models.species import (
    UNKNOWN,
    PartialSpeciesRecord,
    Range,
    SizeInfo,
    SpeciesRecord,
    slugify,
)

logger = get_logger(__name__)

DEFAULT_DEPTH = (0.0, 1000.0, "meters")
DEFAULT_LENGTH = (0.0, 1.0, "meters")
DEFAULT_LIFESPAN = 10
DEFAULT_HABITAT = ["Marine"]
DEFAULT_THREATS = ["Climate Change", "Pollution", "Habitat Loss"]


def _or_unknown(value: Optional[str]) -> str:
    return value.strip() if value and value.strip() else UNKNOWN


def _range_or_default(value: Optional[Range], default: tuple) -> Range:
    if value is not None:
        return Range(min=value.min, max=value.max, unit=value.unit)
    low, high, unit = default
    return Range(min=low, max=high, unit=unit)


def normalize_partial(partial: PartialSpeciesRecord, today: Optional[date] = None) -> SpeciesRecord:
    """
    Complete a partial record with deterministic defaults.

    Args:
        partial: Record as read from one upstream source.
        today: Date stamped into last_updated (defaults to today).

    Returns:
        A full SpeciesRecord whose id is derived from the scientific name.
    """
    scientific_name = partial.scientific_name.strip()
    common_name = _or_unknown(partial.common_name)
    lifespan = partial.lifespan if partial.lifespan and partial.lifespan > 0 else DEFAULT_LIFESPAN
    description = partial.description or (
        f"{scientific_name} is a marine species recorded in {partial.source}."
    )

    return SpeciesRecord(
        id=slugify(scientific_name),
        scientific_name=scientific_name,
        common_name=common_name,
        family=_or_unknown(partial.family),
        order=_or_unknown(partial.order),
        phylum=_or_unknown(partial.phylum),
        kingdom=_or_unknown(partial.kingdom),
        habitat=list(partial.habitat) if partial.habitat else list(DEFAULT_HABITAT),
        depth=_range_or_default(partial.depth, DEFAULT_DEPTH),
        distribution=list(partial.distribution) if partial.distribution else [UNKNOWN],
        conservation_status=_or_unknown(partial.conservation_status),
        size=SizeInfo(
            length=_range_or_default(partial.length, DEFAULT_LENGTH),
            weight=partial.weight,
        ),
        diet=list(partial.diet) if partial.diet else [UNKNOWN],
        lifespan=lifespan,
        description=description,
        images=list(partial.images or []),
        facts=list(partial.facts or []),
        threats=list(partial.threats) if partial.threats else list(DEFAULT_THREATS),
        discovery_year=partial.discovery_year,
        discovery_location=partial.discovery_location,
        sources=[partial.source],
        last_updated=(today or date.today()).isoformat(),
    )


def _dedupe_key(scientific_name: str) -> str:
    return " ".join(scientific_name.lower().split())


def merge_partials(partials: Iterable[PartialSpeciesRecord]) -> List[PartialSpeciesRecord]:
    """
    Deduplicate partial records by scientific name.

    The first occurrence wins; later duplicates are dropped even when they
    carry more fields. Records without a scientific name are skipped.
    """
    seen = set()
    merged: List[PartialSpeciesRecord] = []
    dropped = 0
    for partial in partials:
        key = _dedupe_key(partial.scientific_name or "")
        if not key:
            continue
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        merged.append(partial)

    if dropped:
        logger.debug(f"Dropped {dropped} duplicate records while merging")
    return merged


def build_collection(
    partials: Iterable[PartialSpeciesRecord], today: Optional[date] = None
) -> List[SpeciesRecord]:
    """Merge, deduplicate and normalize partial records into a catalog collection."""
    records: List[SpeciesRecord] = []
    used_ids = set()
    for partial in merge_partials(partials):
        record = normalize_partial(partial, today=today)
        # Distinct names can slug to the same id ("Genus sp." vs "Genus sp")
        base_id, suffix = record.id, 2
        while record.id in used_ids:
            record.id = f"{base_id}-{suffix}"
            suffix += 1
        used_ids.add(record.id)
        records.append(record)
    return records
