"""
Unit tests for oceanvision.core.catalog.aggregator module.
"""

import threading
import time

import pytest

from oceanvision.core.catalog.aggregator import DEFAULT_TTL_SECONDS, MultiSourceAggregator
from oceanvision.models.species import PartialSpeciesRecord


class Clock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _partial(name, source, **kwargs):
    return PartialSpeciesRecord(scientific_name=name, source=source, **kwargs)


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def three_sources(fake_source):
    worms = fake_source(
        "WoRMS",
        records=[_partial("Carcharodon carcharias", "WoRMS", family="Lamnidae")],
    )
    obis = fake_source("OBIS", error="request failed: connection refused")
    fishbase = fake_source(
        "FishBase",
        records=[
            _partial("Amphiprion ocellaris", "FishBase", common_name="Clown anemonefish"),
            _partial("Carcharodon carcharias", "FishBase", common_name="Great white"),
        ],
    )
    return [worms, obis, fishbase]


class TestAggregation:
    """Tests for merging several sources."""

    def test_one_failing_source_does_not_abort(self, three_sources, clock):
        """Test that the other sources' records are served when one fails."""
        aggregator = MultiSourceAggregator(three_sources, clock=clock)

        species = aggregator.get_species()

        names = [record.scientific_name for record in species]
        assert names == ["Carcharodon carcharias", "Amphiprion ocellaris"]
        assert aggregator.envelope.sources == ["WoRMS", "FishBase"]

    def test_duplicate_across_sources_keeps_first(self, three_sources, clock):
        """Test first-wins deduplication across sources in configured order."""
        aggregator = MultiSourceAggregator(three_sources, clock=clock)

        shark = aggregator.get_species()[0]

        assert shark.sources == ["WoRMS"]
        assert shark.family == "Lamnidae"
        assert shark.common_name == "Unknown"

    def test_status_reports_each_source(self, three_sources, clock):
        """Test per-source outcomes in status()."""
        aggregator = MultiSourceAggregator(three_sources, clock=clock)
        aggregator.get_species()

        status = aggregator.status()

        assert status["cached"] is True
        assert status["fresh"] is True
        assert status["species_count"] == 2
        reports = {report["name"]: report for report in status["reports"]}
        assert reports["WoRMS"]["record_count"] == 1
        assert reports["FishBase"]["record_count"] == 2
        assert "connection refused" in reports["OBIS"]["error"]

    def test_status_before_first_load(self, three_sources, clock):
        """Test status() on an empty cache."""
        status = MultiSourceAggregator(three_sources, clock=clock).status()

        assert status["cached"] is False
        assert status["species_count"] == 0
        assert status["last_updated"] is None

    def test_unexpected_source_error_treated_as_failed_refresh(self, fake_source, clock, mocker):
        """Test that an error outside SourceFetchError abandons the refresh."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        mocker.patch.object(source, "fetch", side_effect=RuntimeError("boom"))
        aggregator = MultiSourceAggregator([source], clock=clock)

        assert aggregator.refresh() is False
        assert aggregator.get_species() == []


class TestCaching:
    """Tests for the cache window."""

    def test_default_ttl_is_one_day(self):
        """Test the default cache window."""
        assert DEFAULT_TTL_SECONDS == 86400

    def test_served_from_cache_within_ttl(self, fake_source, clock):
        """Test that reads inside the window do not refetch."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], clock=clock)

        aggregator.get_species()
        clock.advance(DEFAULT_TTL_SECONDS - 1)
        aggregator.get_species()

        assert source.calls == 1
        assert aggregator.is_fresh()

    def test_refetched_after_ttl(self, fake_source, clock):
        """Test that the first read after expiry refetches."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], clock=clock)

        aggregator.get_species()
        clock.advance(DEFAULT_TTL_SECONDS)

        assert not aggregator.is_fresh()
        aggregator.get_species()
        assert source.calls == 2

    def test_custom_ttl(self, fake_source, clock):
        """Test a shorter cache window."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], ttl_seconds=60, clock=clock)

        aggregator.get_species()
        clock.advance(61)
        aggregator.get_species()

        assert source.calls == 2

    def test_clock_going_backwards_invalidates(self, fake_source, clock):
        """Test that an envelope from the future is not trusted."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], clock=clock)

        aggregator.get_species()
        clock.advance(-10)

        assert not aggregator.is_fresh()

    def test_cached_species_never_fetches(self, fake_source, clock):
        """Test that reading the cache directly ignores expiry."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], clock=clock)

        assert aggregator.cached_species() == []
        aggregator.get_species()
        clock.advance(DEFAULT_TTL_SECONDS * 2)

        assert [record.id for record in aggregator.cached_species()] == ["mola-mola"]
        assert source.calls == 1


class TestFailureHandling:
    """Tests for refresh failures."""

    def test_failed_refresh_keeps_last_good(self, fake_source, clock):
        """Test that a failed refresh serves the previous collection."""
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        aggregator = MultiSourceAggregator([source], clock=clock)
        aggregator.get_species()
        first_update = aggregator.envelope.last_updated

        source.error = "request failed: timeout"
        clock.advance(10)

        assert aggregator.refresh() is False
        assert [r.scientific_name for r in aggregator.get_species()] == ["Mola mola"]
        assert aggregator.envelope.last_updated == first_update

    def test_all_sources_fail_serves_empty_then_retries(self, fake_source, clock):
        """Test empty collection on first failure and retry on next access."""
        source = fake_source("WoRMS", error="request failed: offline")
        aggregator = MultiSourceAggregator([source], clock=clock)

        assert aggregator.get_species() == []
        assert aggregator.envelope is None

        source.error = None
        source.records = [_partial("Mola mola", "WoRMS")]

        assert len(aggregator.get_species()) == 1
        assert source.calls == 2

    def test_no_sources(self, clock):
        """Test that an aggregator without sources serves nothing."""
        aggregator = MultiSourceAggregator([], clock=clock)

        assert aggregator.refresh() is False
        assert aggregator.get_species() == []


class TestSingleFlight:
    """Tests for concurrent refresh."""

    def test_concurrent_first_access_fetches_once(self, fake_source):
        """Test that simultaneous readers share one refresh."""
        started = threading.Event()
        release = threading.Event()
        source = fake_source("WoRMS", records=[_partial("Mola mola", "WoRMS")])
        original_fetch = source.fetch

        def slow_fetch():
            started.set()
            release.wait(timeout=5)
            return original_fetch()

        source.fetch = slow_fetch
        aggregator = MultiSourceAggregator([source])
        results = []

        def reader():
            results.append(aggregator.get_species())

        first = threading.Thread(target=reader)
        first.start()
        assert started.wait(timeout=5)

        others = [threading.Thread(target=reader) for _ in range(4)]
        for thread in others:
            thread.start()
        time.sleep(0.05)
        release.set()

        for thread in [first, *others]:
            thread.join(timeout=5)

        assert source.calls == 1
        assert len(results) == 5
        assert all(len(result) == 1 for result in results)

    def test_waiter_reuses_failed_outcome(self, fake_source):
        """Test that callers queued behind a failed refresh do not retry it."""
        started = threading.Event()
        release = threading.Event()
        source = fake_source("WoRMS", error="request failed: offline")
        original_fetch = source.fetch

        def slow_fetch():
            started.set()
            release.wait(timeout=5)
            return original_fetch()

        source.fetch = slow_fetch
        aggregator = MultiSourceAggregator([source])
        outcomes = []

        first = threading.Thread(target=lambda: outcomes.append(aggregator.refresh()))
        first.start()
        assert started.wait(timeout=5)
        second = threading.Thread(target=lambda: outcomes.append(aggregator.refresh()))
        second.start()
        time.sleep(0.05)
        release.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert outcomes == [False, False]
        assert source.calls == 1

