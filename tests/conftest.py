# tests/conftest.py
"""
Global pytest fixtures for oceanvision tests.
"""

import random
from typing import List, Optional

import pytest

from oceanvision.core.catalog.sources import SpeciesSource
from oceanvision.core.catalog.store import SpeciesCatalogStore
from oceanvision.core.exceptions import SourceFetchError
from oceanvision.models.species import PartialSpeciesRecord, SpeciesRecord


def make_record(
    id: str,
    common_name: str,
    habitat: List[str],
    depth: tuple,
    conservation_status: str,
    lifespan: float,
    **overrides,
) -> SpeciesRecord:
    """Build a SpeciesRecord from the handful of fields a test cares about."""
    data = {
        "id": id,
        "scientific_name": f"Testus {id}",
        "common_name": common_name,
        "family": "Testidae",
        "order": "Testiformes",
        "habitat": habitat,
        "depth": {"min": depth[0], "max": depth[1], "unit": "meters"},
        "conservation_status": conservation_status,
        "size": {"length": {"min": 0.1, "max": 1.0}},
        "diet": ["Plankton"],
        "lifespan": lifespan,
        "description": f"{common_name} test record",
        "sources": ["Test"],
        "last_updated": "2024-01-01",
    }
    data.update(overrides)
    return SpeciesRecord.from_dict(data)


class FakeSource(SpeciesSource):
    """In-memory source returning fixed partial records, or raising."""

    def __init__(
        self,
        name: str,
        records: Optional[List[PartialSpeciesRecord]] = None,
        error: Optional[str] = None,
    ) -> None:
        super().__init__(client=None)
        self.name = name
        self.records = list(records or [])
        self.error = error
        self.calls = 0

    def fetch(self) -> List[PartialSpeciesRecord]:
        self.calls += 1
        if self.error:
            raise SourceFetchError(self.name, self.error)
        return list(self.records)

    def _request(self):
        return iter(())

    def parse(self, payload):
        return []


@pytest.fixture
def two_records() -> List[SpeciesRecord]:
    """The clownfish / blue whale fixture used across store tests."""
    return [
        make_record(
            "a",
            "Clownfish",
            ["Coral Reefs"],
            (1, 15),
            "Least Concern",
            10,
            scientific_name="Amphiprion ocellaris",
            family="Pomacentridae",
            order="Perciformes",
        ),
        make_record(
            "b",
            "Blue Whale",
            ["Open Ocean"],
            (0, 500),
            "Endangered",
            90,
            scientific_name="Balaenoptera musculus",
            family="Balaenopteridae",
            order="Artiodactyla",
            diet=["Krill"],
        ),
    ]


@pytest.fixture
def two_record_store(two_records) -> SpeciesCatalogStore:
    """Static store over the two-record fixture."""
    return SpeciesCatalogStore(species=two_records, rng=random.Random(7))


@pytest.fixture
def builtin_store() -> SpeciesCatalogStore:
    """Static store over the built-in catalog."""
    return SpeciesCatalogStore(rng=random.Random(42))


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset the global config and the CLI factory between tests."""
    from oceanvision.cli.service_helpers import set_factory
    from oceanvision.core.config import reset_config

    reset_config()
    set_factory(None)
    yield
    reset_config()
    set_factory(None)


@pytest.fixture
def record_factory():
    """Factory building SpeciesRecords from a few fields."""
    return make_record


@pytest.fixture
def fake_source():
    """Factory for in-memory species sources."""
    return FakeSource
