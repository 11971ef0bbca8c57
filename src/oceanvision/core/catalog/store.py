"""
Species Catalog Store
=====================

In-memory query layer over a collection of SpeciesRecords.

The store runs in one of two modes:
- static: a fixed collection injected at construction (the built-in
  catalog by default); never changes after load.
- dynamic: the collection comes from a MultiSourceAggregator and is
  replaced wholesale whenever the aggregator's cache is refreshed.

All queries are reads over the current snapshot and use case-insensitive
substring matching. No query raises for "not found": absence is an empty
list or None.

Example:
    >>> store = SpeciesCatalogStore()
    >>> store.initialize()
    >>> [s.id for s in store.filter_by_depth_range(5, 20)]
"""

import random
import threading
from typing import Dict, Iterable, List, Optional

from oceanvision.core.catalog.aggregator import MultiSourceAggregator
from oceanvision.core.catalog.builtin import load_builtin_catalog
from oceanvision.core.logger import get_logger
from oceanvision.models.species import CatalogStatistics, SearchCriteria, SpeciesRecord

logger = get_logger(__name__)


def _contains(text: str, term: str) -> bool:
    return term.lower() in (text or "").lower()


def _any_contains(values: Iterable[str], term: str) -> bool:
    return any(_contains(value, term) for value in values)


class SpeciesCatalogStore:
    """
    Search, filter and statistics over a species collection.

    Args:
        species: Records for a static store. Ignored when an aggregator is
            given. Defaults to the built-in catalog.
        aggregator: Multi-source aggregator for a dynamic store.
        rng: Random generator used by get_random().

    Raises:
        ValueError: If the static records contain duplicate ids.
    """

    def __init__(
        self,
        species: Optional[Iterable[SpeciesRecord]] = None,
        aggregator: Optional[MultiSourceAggregator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.aggregator = aggregator
        self._rng = rng or random.Random()
        self._species: List[SpeciesRecord] = []
        self._pending: Optional[List[SpeciesRecord]] = None
        self._initialized = False
        self._init_lock = threading.Lock()

        if aggregator is None:
            records = list(species) if species is not None else load_builtin_catalog()
            ids = [record.id for record in records]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate species ids: {', '.join(duplicates)}")
            self._pending = records

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def mode(self) -> str:
        return "dynamic" if self.aggregator is not None else "static"

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Load the collection once.

        Safe to call repeatedly and from several threads; only the first call
        does any work and the others wait for it.
        """
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            if self.aggregator is not None:
                self._species = self.aggregator.get_species()
            else:
                self._species = list(self._pending or [])
                self._pending = None
            self._initialized = True
            logger.info(f"Species catalog ready ({self.mode}, {len(self._species)} species)")

    def refresh(self) -> bool:
        """
        Force a reload from upstream sources.

        Static stores have nothing to reload and return True. Dynamic stores
        keep serving the previous collection if the refresh fails.

        Returns:
            True if the collection was reloaded (or nothing needed reloading).
        """
        if self.aggregator is None:
            self.initialize()
            return True
        ok = self.aggregator.refresh()
        self._species = self.aggregator.cached_species()
        self._initialized = True
        return ok

    def _snapshot(self) -> List[SpeciesRecord]:
        if not self._initialized:
            # The load just attempted counts as this query's refresh
            self.initialize()
        elif self.aggregator is not None:
            # Swaps in the refreshed collection once the cache window expires
            self._species = self.aggregator.get_species()
        return self._species

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_species(self) -> List[SpeciesRecord]:
        """Return a copy of the whole collection."""
        return list(self._snapshot())

    def search_by_name(self, query: str) -> List[SpeciesRecord]:
        """
        Find species whose common name, scientific name, family or order
        contains the query. A blank query matches nothing.
        """
        term = (query or "").strip()
        if not term:
            return []
        return [
            species
            for species in self._snapshot()
            if _contains(species.common_name, term)
            or _contains(species.scientific_name, term)
            or _contains(species.family, term)
            or _contains(species.order, term)
        ]

    def filter_by_habitat(self, habitat: str) -> List[SpeciesRecord]:
        """Species with at least one habitat label containing the substring."""
        return [s for s in self._snapshot() if _any_contains(s.habitat, habitat or "")]

    def filter_by_conservation_status(self, status: str) -> List[SpeciesRecord]:
        """Species whose conservation status contains the substring."""
        return [s for s in self._snapshot() if _contains(s.conservation_status, status or "")]

    def filter_by_depth_range(self, min_depth: float, max_depth: float) -> List[SpeciesRecord]:
        """Species whose depth range overlaps [min_depth, max_depth]."""
        return [s for s in self._snapshot() if s.depth.overlaps(min_depth, max_depth)]

    def get_by_id(self, species_id: str) -> Optional[SpeciesRecord]:
        """Exact id lookup; None when not found."""
        for species in self._snapshot():
            if species.id == species_id:
                return species
        return None

    def get_random(self, count: int = 1) -> List[SpeciesRecord]:
        """
        Draw up to `count` distinct species in random order.

        Asking for more species than the catalog holds returns the whole
        catalog, shuffled. The store's own order is never changed.
        """
        species = self._snapshot()
        if count <= 0 or not species:
            return []
        return self._rng.sample(species, min(count, len(species)))

    def advanced_search(
        self, criteria: Optional[SearchCriteria] = None, **kwargs
    ) -> List[SpeciesRecord]:
        """
        Conjunction of the given criteria.

        Accepts a SearchCriteria or its fields as keyword arguments. The
        name criterion matches common or scientific name only. The depth
        criterion applies only when both min_depth and max_depth are given;
        a single bound imposes no constraint.

        Example:
            >>> store.advanced_search(habitat="reef", conservation_status="endangered")
        """
        if criteria is None:
            criteria = SearchCriteria(**kwargs)

        results = self._snapshot()

        if criteria.name:
            results = [
                s
                for s in results
                if _contains(s.common_name, criteria.name)
                or _contains(s.scientific_name, criteria.name)
            ]
        if criteria.habitat:
            results = [s for s in results if _any_contains(s.habitat, criteria.habitat)]
        if criteria.conservation_status:
            results = [
                s for s in results if _contains(s.conservation_status, criteria.conservation_status)
            ]
        if criteria.has_depth_range:
            results = [
                s for s in results if s.depth.overlaps(criteria.min_depth, criteria.max_depth)
            ]
        if criteria.diet:
            results = [s for s in results if _any_contains(s.diet, criteria.diet)]

        return list(results)

    def list_habitats(self) -> List[str]:
        """Sorted distinct habitat labels."""
        return sorted({h for s in self._snapshot() for h in s.habitat})

    def list_conservation_statuses(self) -> List[str]:
        """Sorted distinct conservation statuses."""
        return sorted({s.conservation_status for s in self._snapshot()})

    def get_statistics(self) -> CatalogStatistics:
        """
        Aggregate counts over the collection.

        Each species counts once per habitat label it carries. The average
        lifespan is None for an empty collection.
        """
        species = self._snapshot()

        conservation_counts: Dict[str, int] = {}
        habitat_counts: Dict[str, int] = {}
        for record in species:
            status = record.conservation_status
            conservation_counts[status] = conservation_counts.get(status, 0) + 1
            for habitat in record.habitat:
                habitat_counts[habitat] = habitat_counts.get(habitat, 0) + 1

        average_lifespan = (
            sum(record.lifespan for record in species) / len(species) if species else None
        )

        envelope = self.aggregator.envelope if self.aggregator is not None else None
        if envelope is not None:
            last_updated = envelope.last_updated_iso
            sources = list(envelope.sources)
        else:
            dates = [record.last_updated for record in species if record.last_updated]
            last_updated = max(dates) if dates else None
            sources = list(dict.fromkeys(src for record in species for src in record.sources))

        return CatalogStatistics(
            total_species=len(species),
            conservation_counts=conservation_counts,
            habitat_counts=habitat_counts,
            average_lifespan=average_lifespan,
            last_updated=last_updated,
            sources=sources,
        )
