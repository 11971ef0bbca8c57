"""
Multi-Source Species Aggregator
===============================

Fetches every configured upstream source concurrently, merges their partial
records (first occurrence of a scientific name wins), normalizes them into
SpeciesRecords and caches the merged collection for a fixed window.

Failure handling:
- A failing source contributes no records and is logged; the others proceed.
- If every source fails, or an unexpected error escapes the per-source
  guards, the refresh is abandoned: the last good collection keeps being
  served, or an empty collection when there is none. The next access
  after a failed first load retries.

Refreshes are single-flight: concurrent callers wait for the refresh in
progress and then reuse its result.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence

from oceanvision.core.catalog.normalize import build_collection
from oceanvision.core.catalog.sources import SpeciesSource
from oceanvision.core.exceptions import AggregationError, SourceFetchError
from oceanvision.core.logger import get_logger
from oceanvision.models.species import (
    CacheEnvelope,
    PartialSpeciesRecord,
    SourceReport,
    SpeciesRecord,
)

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 24 * 3600


class MultiSourceAggregator:
    """
    Aggregates species records from several upstream sources.

    Args:
        sources: Source adapters, in merge priority order.
        ttl_seconds: Cache validity window (default: 24 hours).
        max_workers: Thread pool size (default: one thread per source).
        clock: Time function returning epoch seconds, injectable for tests.

    Example:
        >>> aggregator = MultiSourceAggregator([WoRMSSource(client, terms=["shark"])])
        >>> species = aggregator.get_species()
    """

    def __init__(
        self,
        sources: Sequence[SpeciesSource],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_workers: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.sources = list(sources)
        self.ttl_seconds = ttl_seconds
        self.max_workers = max_workers or max(1, len(self.sources))
        self._clock = clock
        self._envelope: Optional[CacheEnvelope] = None
        self._reports: List[SourceReport] = []
        self._lock = threading.Lock()
        self._generation = 0
        self._last_ok = False

    @property
    def envelope(self) -> Optional[CacheEnvelope]:
        """The current cache envelope, or None before the first good refresh."""
        return self._envelope

    def is_fresh(self) -> bool:
        envelope = self._envelope
        return envelope is not None and envelope.is_valid(self._clock(), self.ttl_seconds)

    def get_species(self) -> List[SpeciesRecord]:
        """Return the cached collection, refreshing it first if it has expired."""
        if not self.is_fresh():
            self._refresh(force=False)
        return self.cached_species()

    def cached_species(self) -> List[SpeciesRecord]:
        """Return the cached collection without refreshing, or [] when there is none."""
        envelope = self._envelope
        return envelope.species if envelope is not None else []

    def refresh(self) -> bool:
        """
        Force a refresh regardless of cache age.

        Returns:
            True if a new collection was stored, False if the refresh failed
            and the previous collection was kept.
        """
        return self._refresh(force=True)

    def status(self) -> Dict[str, object]:
        """Cache metadata and per-source outcome of the last refresh."""
        envelope = self._envelope
        return {
            "cached": envelope is not None,
            "fresh": self.is_fresh(),
            "species_count": len(envelope.species) if envelope else 0,
            "last_updated": envelope.last_updated_iso if envelope else None,
            "sources": list(envelope.sources) if envelope else [],
            "reports": [report.to_dict() for report in self._reports],
        }

    def _refresh(self, force: bool) -> bool:
        generation = self._generation
        with self._lock:
            # A refresh completed while we waited on the lock; reuse its outcome
            if self._generation != generation:
                return self._last_ok
            if not force and self.is_fresh():
                return True

            self._last_ok = False
            try:
                self._envelope = self._aggregate()
                self._last_ok = True
                return True
            except AggregationError as e:
                logger.error(f"Species aggregation failed: {e}")
            except Exception as e:
                logger.exception(f"Unexpected error during species aggregation: {e}")
            finally:
                self._generation += 1

            if self._envelope is not None:
                logger.warning(
                    f"Keeping {len(self._envelope.species)} cached species "
                    f"from {self._envelope.last_updated_iso}"
                )
            return False

    def _aggregate(self) -> CacheEnvelope:
        if not self.sources:
            raise AggregationError("no species sources configured")

        reports: List[SourceReport] = []
        partials: List[PartialSpeciesRecord] = []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(source.fetch) for source in self.sources]

            # Merge in configured order so first-wins dedupe is deterministic
            for source, future in zip(self.sources, futures):
                try:
                    records = future.result()
                except SourceFetchError as e:
                    logger.warning(f"Species source failed: {e}")
                    reports.append(SourceReport(name=source.name, error=str(e)))
                    continue
                partials.extend(records)
                reports.append(SourceReport(name=source.name, record_count=len(records)))

        self._reports = reports
        succeeded = [report.name for report in reports if report.ok]
        if not succeeded:
            raise AggregationError("all species sources failed")

        species = build_collection(partials)
        logger.info(
            f"Aggregated {len(species)} species from {len(partials)} records "
            f"({', '.join(succeeded)})"
        )
        return CacheEnvelope(species=species, last_updated=self._clock(), sources=succeeded)
