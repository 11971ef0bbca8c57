"""
Integration tests for the oceanvision CLI.
"""

import json
import random

import pytest
from click.testing import CliRunner

from oceanvision import __version__
from oceanvision.cli import cli
from oceanvision.cli import service_helpers
from oceanvision.cli.service_helpers import set_factory
from oceanvision.core.catalog.store import SpeciesCatalogStore
from oceanvision.core.config import get_default_config
from oceanvision.services import ServiceFactory


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def builtin_factory():
    """Install a factory over the built-in catalog with a seeded RNG."""
    factory = ServiceFactory(
        config=get_default_config(),
        store=SpeciesCatalogStore(rng=random.Random(0)),
    )
    set_factory(factory)
    return factory


def _json(result):
    return json.loads(result.output)


class TestCLIBasic:
    """Basic CLI tests."""

    def test_cli_help(self, runner):
        """Test that CLI help works."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "species" in result.output
        assert "config" in result.output

    def test_version(self, runner):
        """Test --version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_species_group_help(self, runner):
        """Test that the species group lists its commands."""
        result = runner.invoke(cli, ["species", "--help"])

        assert result.exit_code == 0
        for command in ["search", "show", "random", "stats", "export", "refresh"]:
            assert command in result.output


class TestSpeciesSearch:
    """Tests for species search."""

    def test_search_by_name(self, runner, builtin_factory):
        """Test a name query."""
        result = runner.invoke(cli, ["species", "search", "whale", "--format", "json"])

        assert result.exit_code == 0
        assert [item["id"] for item in _json(result)] == ["blue-whale"]

    def test_search_with_filters(self, runner, builtin_factory):
        """Test habitat and status filters."""
        result = runner.invoke(
            cli,
            ["species", "search", "--habitat", "reef", "--status", "endangered", "--format", "json"],
        )

        assert result.exit_code == 0
        ids = sorted(item["id"] for item in _json(result))
        assert ids == ["coral-staghorn", "manta-ray", "sea-turtle-green"]

    def test_search_depth_range(self, runner, builtin_factory):
        """Test the depth overlap filter."""
        result = runner.invoke(
            cli,
            ["species", "search", "--min-depth", "1100", "--max-depth", "3000", "--format", "json"],
        )

        assert result.exit_code == 0
        assert sorted(item["id"] for item in _json(result)) == [
            "great-white-shark",
            "octopus-giant-pacific",
        ]

    def test_search_one_sided_depth_warns(self, runner, builtin_factory):
        """Test that a single depth bound is reported and ignored."""
        result = runner.invoke(cli, ["species", "search", "--min-depth", "5000"])

        assert result.exit_code == 0
        assert "ignoring it" in result.output

    def test_search_without_query_shows_random(self, runner, builtin_factory):
        """Test the random selection when nothing is given."""
        result = runner.invoke(cli, ["species", "search", "--format", "json"])

        assert result.exit_code == 0
        assert len(_json(result)) == 6

    def test_search_no_matches(self, runner, builtin_factory):
        """Test the empty result message."""
        result = runner.invoke(cli, ["species", "search", "kraken"])

        assert result.exit_code == 0
        assert 'No species found matching "kraken"' in result.output

    def test_search_table_output(self, runner, builtin_factory):
        """Test the default table rendering."""
        result = runner.invoke(cli, ["species", "search", "octopus"])

        assert result.exit_code == 0
        assert "Found 1 species" in result.output


class TestSpeciesShow:
    """Tests for species show."""

    def test_show_json(self, runner, builtin_factory):
        """Test showing a record as JSON."""
        result = runner.invoke(cli, ["species", "show", "clownfish", "--format", "json"])

        assert result.exit_code == 0
        assert _json(result)["scientific_name"] == "Amphiprion ocellaris"

    def test_show_panel(self, runner, builtin_factory):
        """Test the detail panel."""
        result = runner.invoke(cli, ["species", "show", "clownfish"])

        assert result.exit_code == 0
        assert "Clownfish" in result.output

    def test_show_missing(self, runner, builtin_factory):
        """Test that an unknown id exits with an error."""
        result = runner.invoke(cli, ["species", "show", "kraken"])

        assert result.exit_code == 1
        assert "Species not found: kraken" in result.output


class TestSpeciesOtherCommands:
    """Tests for random, stats, export and refresh."""

    def test_random_count(self, runner, builtin_factory):
        """Test drawing several random species."""
        result = runner.invoke(cli, ["species", "random", "--count", "3", "--format", "json"])

        assert result.exit_code == 0
        ids = [item["id"] for item in _json(result)]
        assert len(ids) == 3
        assert len(set(ids)) == 3

    def test_stats_json(self, runner, builtin_factory):
        """Test statistics output."""
        result = runner.invoke(cli, ["species", "stats", "--format", "json"])

        assert result.exit_code == 0
        stats = _json(result)
        assert stats["total_species"] == 10
        assert stats["conservation_counts"]["Least Concern"] == 3
        assert stats["average_lifespan"] == pytest.approx(44.9)

    def test_stats_table(self, runner, builtin_factory):
        """Test the statistics table renders."""
        result = runner.invoke(cli, ["species", "stats"])

        assert result.exit_code == 0
        assert "Least Concern" in result.output

    def test_export_csv_by_extension(self, runner, builtin_factory, tmp_path):
        """Test that the format follows the file extension."""
        output = tmp_path / "catalog.csv"

        result = runner.invoke(cli, ["species", "export", str(output)])

        assert result.exit_code == 0
        assert "Exported 10 species" in result.output
        assert output.read_text(encoding="utf-8").startswith("id,scientific_name")

    def test_export_json(self, runner, builtin_factory, tmp_path):
        """Test explicit JSON export."""
        output = tmp_path / "catalog.out"

        result = runner.invoke(cli, ["species", "export", str(output), "--format", "json"])

        assert result.exit_code == 0
        assert len(json.loads(output.read_text(encoding="utf-8"))) == 10

    def test_refresh_static(self, runner, builtin_factory):
        """Test that refresh on a static catalog is a no-op."""
        result = runner.invoke(cli, ["species", "refresh"])

        assert result.exit_code == 0
        assert "nothing to refresh" in result.output


class TestGlobalOptions:
    """Tests for root options and configuration commands."""

    def test_config_file_option(self, runner, tmp_path, mocker):
        """Test that --config settings reach the services."""
        mocker.patch(
            "oceanvision.core.config.get_config_locations",
            return_value=[tmp_path / "missing.toml"],
        )
        path = tmp_path / "custom.toml"
        path.write_text("[catalog]\nrandom_count = 2\n", encoding="utf-8")

        result = runner.invoke(
            cli, ["--config", str(path), "species", "search", "--format", "json"]
        )

        assert result.exit_code == 0
        assert len(_json(result)) == 2

    def test_mode_option_overrides_config(self, runner, tmp_path, mocker):
        """Test that --mode replaces the configured catalog mode."""
        mocker.patch(
            "oceanvision.core.config.get_config_locations",
            return_value=[tmp_path / "missing.toml"],
        )

        result = runner.invoke(cli, ["--mode", "dynamic", "config", "show"])

        assert result.exit_code == 0
        assert "mode = dynamic" in result.output

    def test_config_init(self, runner, tmp_path):
        """Test writing a default config file and refusing to overwrite it."""
        path = tmp_path / "oceanvision.toml"

        first = runner.invoke(cli, ["config", "init", str(path)])
        second = runner.invoke(cli, ["config", "init", str(path)])

        assert first.exit_code == 0
        assert path.exists()
        assert second.exit_code == 1
        assert "--force" in second.output

    def test_config_path(self, runner):
        """Test listing config locations."""
        result = runner.invoke(cli, ["config", "path"])

        assert result.exit_code == 0
        assert "oceanvision.toml" in result.output

    def test_factory_closed_after_command(self, runner, builtin_factory, mocker):
        """Test that the shared factory releases its HTTP session on exit."""
        client = mocker.Mock()
        builtin_factory._client = client
        close = mocker.spy(builtin_factory, "close")

        result = runner.invoke(cli, ["species", "stats", "--format", "json"])

        assert result.exit_code == 0
        close.assert_called_once()
        client.close.assert_called_once()
        assert service_helpers._factory is None
