"""
Unit tests for oceanvision.core.config module.
"""

import pytest

from oceanvision.core.config import (
    DEFAULT_CONFIG,
    Config,
    create_default_config_file,
    get_config,
    get_default_config,
    load_config_cascade,
    load_toml,
    reset_config,
    save_toml,
    set_config,
)


@pytest.fixture
def no_system_configs(mocker, tmp_path):
    """Point the cascade at empty locations so real config files are ignored."""
    mocker.patch(
        "oceanvision.core.config.get_config_locations",
        return_value=[tmp_path / "missing.toml"],
    )


class TestConfig:
    """Tests for Config class."""

    def test_default_config(self):
        """Test getting default configuration."""
        config = get_default_config()

        assert isinstance(config, Config)
        assert config.get("catalog", "mode") == "static"
        assert config.get("catalog", "cache_ttl_hours") == 24
        assert config.get("api", "requests_per_second") == 2.0

    def test_config_get_default(self):
        """Test Config.get fallback values."""
        config = get_default_config()

        assert config.get("catalog", "nonexistent", "default") == "default"
        assert config.get("nosection", "key", 5) == 5

    def test_config_set(self):
        """Test Config.set method."""
        config = get_default_config()

        config.set("catalog", "mode", "dynamic")

        assert config.get("catalog", "mode") == "dynamic"

    def test_default_config_is_a_copy(self):
        """Test that mutating a default config leaves DEFAULT_CONFIG intact."""
        config = get_default_config()
        config.set("catalog", "mode", "dynamic")
        config.source_settings("worms")["enabled"] = False

        assert DEFAULT_CONFIG["catalog"]["mode"] == "static"
        assert DEFAULT_CONFIG["sources"]["worms"]["enabled"] is True

    def test_source_settings(self):
        """Test per-source settings lookup."""
        config = get_default_config()

        assert config.source_settings("obis")["taxonid"] == 2
        assert config.source_settings("unknown") == {}

    def test_config_from_dict(self):
        """Test Config.from_dict method."""
        config = Config.from_dict({"catalog": {"mode": "dynamic"}}, source="x.toml")

        assert config.catalog["mode"] == "dynamic"
        assert config.sources == {}
        assert config._source == "x.toml"
        assert "_source" not in config.to_dict()


class TestTOMLOperations:
    """Tests for TOML load/save operations."""

    def test_load_missing_file(self, tmp_path):
        """Test that loading a missing file raises."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nope.toml")

    def test_save_and_load_nested_tables(self, tmp_path):
        """Test writing and reading source sub-tables."""
        path = tmp_path / "config.toml"

        save_toml(
            {
                "catalog": {"mode": "dynamic", "cache_ttl_hours": 12},
                "sources": {"worms": {"enabled": True, "terms": ["shark", "ray"]}},
            },
            path,
        )
        data = load_toml(path)

        assert data["catalog"] == {"mode": "dynamic", "cache_ttl_hours": 12}
        assert data["sources"]["worms"]["terms"] == ["shark", "ray"]

    def test_save_escapes_quotes_and_backslashes(self, tmp_path):
        """Test that strings with TOML special characters survive a save."""
        path = tmp_path / "config.toml"
        agent = 'oceanvision "field kit" C:\\data'

        save_toml(
            {
                "api": {"user_agent": agent},
                "sources": {"worms": {"terms": ['hammerhead "great"', "a\\b", "line\nbreak"]}},
            },
            path,
        )
        data = load_toml(path)

        assert data["api"]["user_agent"] == agent
        assert data["sources"]["worms"]["terms"] == ['hammerhead "great"', "a\\b", "line\nbreak"]

    def test_create_default_config_file(self, tmp_path):
        """Test that the default file parses back to the defaults."""
        path = create_default_config_file(str(tmp_path / "oceanvision.toml"))

        assert load_toml(path) == DEFAULT_CONFIG


class TestConfigCascade:
    """Tests for load_config_cascade."""

    def test_defaults_only(self, no_system_configs):
        """Test that no files yields the defaults with no source."""
        config = load_config_cascade()

        assert config.to_dict() == DEFAULT_CONFIG
        assert config._source is None

    def test_explicit_file_overrides_defaults(self, no_system_configs, tmp_path):
        """Test merging an explicit file over the defaults."""
        path = tmp_path / "custom.toml"
        path.write_text(
            '[catalog]\nmode = "dynamic"\n\n[sources.fishbase]\nenabled = false\n',
            encoding="utf-8",
        )

        config = load_config_cascade(str(path))

        assert config.get("catalog", "mode") == "dynamic"
        assert config.get("catalog", "cache_ttl_hours") == 24
        assert config.source_settings("fishbase") == {"enabled": False, "limit": 50}
        assert config._source == str(path)

    def test_missing_explicit_file_uses_defaults(self, no_system_configs, tmp_path):
        """Test that a missing explicit path is ignored."""
        config = load_config_cascade(str(tmp_path / "absent.toml"))

        assert config.get("catalog", "mode") == "static"

    def test_invalid_toml_is_skipped(self, no_system_configs, tmp_path):
        """Test that a broken file does not abort loading."""
        path = tmp_path / "broken.toml"
        path.write_text("[catalog\nmode = ", encoding="utf-8")

        config = load_config_cascade(str(path))

        assert config.get("catalog", "mode") == "static"
        assert config._source is None

    def test_unknown_mode_falls_back_to_static(self, no_system_configs, tmp_path):
        """Test that an unknown catalog mode is replaced."""
        path = tmp_path / "mode.toml"
        path.write_text('[catalog]\nmode = "hybrid"\n', encoding="utf-8")

        assert load_config_cascade(str(path)).get("catalog", "mode") == "static"


class TestGlobalConfig:
    """Tests for the process-wide configuration."""

    def test_set_and_reset(self, no_system_configs):
        """Test replacing and resetting the global config."""
        custom = get_default_config()
        custom.set("catalog", "random_count", 3)

        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config().get("catalog", "random_count") == 6
