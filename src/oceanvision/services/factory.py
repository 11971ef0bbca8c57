"""
Service Factory
===============

Composition root for the species catalog.

The factory reads the configuration once and builds the store in the mode
it names: the built-in catalog for "static", or a MultiSourceAggregator
over the enabled upstream sources for "dynamic". Applications can inject
their own store instead.

Usage:
    from oceanvision.services.factory import ServiceFactory

    factory = ServiceFactory()
    result = factory.species.browse(query="whale")
    factory.close()
"""

from typing import List, Optional

from oceanvision.core.catalog import (
    FishBaseSource,
    MultiSourceAggregator,
    OBISSource,
    SpeciesCatalogStore,
    SpeciesSource,
    WoRMSSource,
)
from oceanvision.core.config import Config, get_config
from oceanvision.core.http import APIClient, RateLimiter
from oceanvision.core.logger import get_logger

from .config import ConfigService
from .species import SpeciesService

logger = get_logger(__name__)


def build_api_client(config: Config) -> APIClient:
    """Create the shared HTTP client from the [api] section."""
    rps = config.get("api", "requests_per_second")
    return APIClient(
        rate_limiter=RateLimiter(requests_per_second=float(rps), burst_size=3) if rps else None,
        timeout=config.get("api", "timeout", 30),
        max_retries=config.get("api", "max_retries", 3),
        user_agent=config.get("api", "user_agent", "oceanvision/0.1"),
    )


def build_sources(config: Config, client: APIClient) -> List[SpeciesSource]:
    """Create the enabled upstream sources in merge priority order."""
    sources: List[SpeciesSource] = []

    worms = config.source_settings("worms")
    if worms.get("enabled", False):
        sources.append(WoRMSSource(client, terms=worms.get("terms", [])))

    obis = config.source_settings("obis")
    if obis.get("enabled", False):
        sources.append(OBISSource(client, taxonid=obis.get("taxonid"), size=obis.get("size", 50)))

    fishbase = config.source_settings("fishbase")
    if fishbase.get("enabled", False):
        sources.append(FishBaseSource(client, limit=fishbase.get("limit", 50)))

    return sources


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Attributes:
        config: Configuration used to build services
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[SpeciesCatalogStore] = None,
    ):
        """
        Initialize the service factory.

        Args:
            config: Configuration to use. If None, uses the global configuration.
            store: Prebuilt catalog store. If None, one is built from config.
        """
        self.config = config or get_config()
        self._store = store
        self._client: Optional[APIClient] = None
        self._species: Optional[SpeciesService] = None
        self._config_service: Optional[ConfigService] = None

    def create_store(self) -> SpeciesCatalogStore:
        """Build a catalog store in the configured mode."""
        mode = self.config.get("catalog", "mode", "static")
        if mode != "dynamic":
            return SpeciesCatalogStore()

        self._client = build_api_client(self.config)
        sources = build_sources(self.config, self._client)
        if not sources:
            logger.warning("Dynamic catalog mode with no enabled sources")

        aggregator = MultiSourceAggregator(
            sources,
            ttl_seconds=float(self.config.get("catalog", "cache_ttl_hours", 24)) * 3600,
            max_workers=self.config.get("catalog", "max_workers"),
        )
        return SpeciesCatalogStore(aggregator=aggregator)

    @property
    def store(self) -> SpeciesCatalogStore:
        """Get the catalog store, building it on first access."""
        if self._store is None:
            self._store = self.create_store()
        return self._store

    @property
    def species(self) -> SpeciesService:
        """Get SpeciesService instance."""
        if self._species is None:
            self._species = SpeciesService(
                self.store,
                random_count=self.config.get("catalog", "random_count", 6),
            )
        return self._species

    @property
    def config_service(self) -> ConfigService:
        """Get ConfigService instance."""
        if self._config_service is None:
            self._config_service = ConfigService()
        return self._config_service

    def close(self) -> None:
        """Release HTTP resources held by upstream sources."""
        if self._client is not None:
            self._client.close()
            self._client = None
