# services/species.py
"""
Service for marine species catalog operations.

Wraps a SpeciesCatalogStore in ServiceResult objects for the CLI and other
front-ends, and adds catalog export.

Example:
    >>> service = SpeciesService(SpeciesCatalogStore())
    >>> result = service.browse(query="shark")
    >>> if result.success:
    ...     for species in result.data:
    ...         print(species.common_name)
"""

import csv
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from oceanvision.core.catalog.store import SpeciesCatalogStore
from oceanvision.core.logger import get_logger
from oceanvision.models.species import CatalogStatistics, SearchCriteria, SpeciesRecord

from .base import BaseService, ServiceResult

logger = get_logger(__name__)

EXPORT_FORMATS = ("json", "csv")

CSV_FIELDS = [
    "id",
    "scientific_name",
    "common_name",
    "family",
    "order",
    "phylum",
    "kingdom",
    "conservation_status",
    "habitat",
    "distribution",
    "diet",
    "depth_min",
    "depth_max",
    "depth_unit",
    "length_min",
    "length_max",
    "length_unit",
    "weight_min",
    "weight_max",
    "weight_unit",
    "lifespan",
    "threats",
    "sources",
    "discovery_year",
    "last_updated",
]


def _csv_row(record: SpeciesRecord) -> Dict[str, Any]:
    """Flatten a record into one CSV row."""
    weight = record.size.weight
    return {
        "id": record.id,
        "scientific_name": record.scientific_name,
        "common_name": record.common_name,
        "family": record.family,
        "order": record.order,
        "phylum": record.phylum,
        "kingdom": record.kingdom,
        "conservation_status": record.conservation_status,
        "habitat": "; ".join(record.habitat),
        "distribution": "; ".join(record.distribution),
        "diet": "; ".join(record.diet),
        "depth_min": record.depth.min,
        "depth_max": record.depth.max,
        "depth_unit": record.depth.unit,
        "length_min": record.size.length.min,
        "length_max": record.size.length.max,
        "length_unit": record.size.length.unit,
        "weight_min": weight.min if weight else "",
        "weight_max": weight.max if weight else "",
        "weight_unit": weight.unit if weight else "",
        "lifespan": record.lifespan,
        "threats": "; ".join(record.threats),
        "sources": "; ".join(record.sources),
        "discovery_year": record.discovery_year or "",
        "last_updated": record.last_updated,
    }


class SpeciesService(BaseService):
    """
    Service for species catalog queries.

    Provides high-level methods for:
    - Name search and filtered (advanced) search
    - Lookup by id and random sampling
    - Catalog statistics and upstream refresh
    - Exporting the catalog to JSON or CSV
    """

    def __init__(self, store: SpeciesCatalogStore, random_count: int = 6) -> None:
        """
        Initialize species service.

        Args:
            store: The catalog store to query.
            random_count: Number of species shown when browsing without a query.
        """
        super().__init__()
        self.store = store
        self.random_count = random_count

    def browse(
        self,
        query: str = "",
        criteria: Optional[SearchCriteria] = None,
    ) -> ServiceResult[List[SpeciesRecord]]:
        """
        Search the catalog the way the species explorer does.

        No query and no filters returns a random selection; any filter runs
        an advanced search (with the query as the name criterion); a bare
        query runs a name search.

        Args:
            query: Free-text name query.
            criteria: Optional filters; its name field is overwritten by query.
        """
        try:
            query = (query or "").strip()
            filters = criteria or SearchCriteria()

            if not query and filters.is_empty():
                results = self.store.get_random(self.random_count)
                message = f"Showing {len(results)} random species"
            elif not filters.is_empty():
                results = self.store.advanced_search(replace(filters, name=query or None))
                message = f"Found {len(results)} species"
            else:
                results = self.store.search_by_name(query)
                message = f"Found {len(results)} species matching '{query}'"

            return ServiceResult.ok(data=results, message=message)
        except Exception as e:
            logger.error(f"Species search failed: {e}")
            return ServiceResult.fail(f"Search failed: {e}")

    def get(self, species_id: str) -> ServiceResult[SpeciesRecord]:
        """Look up a species by its id."""
        try:
            record = self.store.get_by_id(species_id)
        except Exception as e:
            logger.error(f"Species lookup failed: {e}")
            return ServiceResult.fail(f"Lookup failed: {e}")

        if record is None:
            return ServiceResult.fail(f"Species not found: {species_id}")
        return ServiceResult.ok(data=record, message=f"Found: {record.common_name}")

    def random(self, count: int = 1) -> ServiceResult[List[SpeciesRecord]]:
        """Draw random species from the catalog."""
        try:
            results = self.store.get_random(count)
            return ServiceResult.ok(data=results, message=f"Selected {len(results)} species")
        except Exception as e:
            logger.error(f"Random selection failed: {e}")
            return ServiceResult.fail(f"Random selection failed: {e}")

    def statistics(self) -> ServiceResult[CatalogStatistics]:
        """Compute catalog statistics."""
        try:
            stats = self.store.get_statistics()
            return ServiceResult.ok(
                data=stats, message=f"Statistics for {stats.total_species} species"
            )
        except Exception as e:
            logger.error(f"Statistics failed: {e}")
            return ServiceResult.fail(f"Statistics failed: {e}")

    def refresh(self) -> ServiceResult[Dict[str, Any]]:
        """
        Reload the catalog from upstream sources.

        A failed refresh is reported as a warning because the store keeps
        serving its previous collection.
        """
        try:
            ok = self.store.refresh()
        except Exception as e:
            logger.error(f"Catalog refresh failed: {e}")
            return ServiceResult.fail(f"Refresh failed: {e}")

        if self.store.aggregator is None:
            status: Dict[str, Any] = {
                "mode": "static",
                "species_count": len(self.store.get_all_species()),
            }
            return ServiceResult.ok(data=status, message="Static catalog, nothing to refresh")

        status = {"mode": "dynamic", **self.store.aggregator.status()}
        if not ok:
            return ServiceResult.ok(
                data=status,
                message="Refresh failed, serving previous data",
                warnings=["All upstream sources failed or aggregation errored"],
            )
        return ServiceResult.ok(
            data=status, message=f"Refreshed {status['species_count']} species"
        )

    def export(
        self,
        output_path: Union[str, Path],
        format: str = "json",
    ) -> ServiceResult[Path]:
        """
        Export the whole catalog to a file.

        Args:
            output_path: Path to save the file.
            format: Output format ("json" or "csv").
        """
        if format not in EXPORT_FORMATS:
            return ServiceResult.fail(f"Unsupported export format: {format}")

        error = self._validate_output_path(str(output_path))
        if error:
            return ServiceResult.fail(error)

        try:
            output_path = Path(output_path)
            records = self.store.get_all_species()

            if format == "json":
                with open(output_path, "w", encoding="utf-8") as f:
                    json.dump([record.to_dict() for record in records], f, indent=2)
            else:
                with open(output_path, "w", newline="", encoding="utf-8") as f:
                    writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
                    writer.writeheader()
                    writer.writerows(_csv_row(record) for record in records)

            return ServiceResult.ok(
                data=output_path,
                message=f"Exported {len(records)} species to {output_path}",
            )
        except OSError as e:
            logger.error(f"Catalog export failed: {e}")
            return ServiceResult.fail(f"Export failed: {e}")
