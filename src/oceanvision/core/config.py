"""
Configuration Management
========================

TOML-based configuration for the oceanvision catalog and CLI.

Configuration files are merged in the following order (lowest to highest priority):
1. Built-in defaults
2. /etc/oceanvision/config.toml (system config)
3. ~/.config/oceanvision/config.toml (user config)
4. ./oceanvision.toml (current directory)
5. Path specified via --config option

Example configuration file (oceanvision.toml):

    [catalog]
    mode = "dynamic"
    cache_ttl_hours = 24
    max_workers = 3
    random_count = 6

    [sources.worms]
    enabled = true
    terms = ["shark", "whale", "turtle", "coral"]

    [sources.obis]
    enabled = true
    taxonid = 2
    size = 50

    [sources.fishbase]
    enabled = false
    limit = 50

    [api]
    timeout = 30
    max_retries = 3
    requests_per_second = 2.0
    user_agent = "oceanvision/0.1"

    [logging]
    level = "INFO"
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from oceanvision.core.logger import get_logger

logger = get_logger(__name__)

# Use tomli for Python < 3.11, tomllib for Python >= 3.11
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


CATALOG_MODES = ("static", "dynamic")

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "catalog": {
        "mode": "static",
        "cache_ttl_hours": 24,
        "max_workers": 3,
        "random_count": 6,
    },
    "sources": {
        "worms": {
            "enabled": True,
            "terms": ["shark", "whale", "turtle", "coral", "octopus"],
        },
        "obis": {
            "enabled": True,
            "taxonid": 2,  # Animalia
            "size": 50,
        },
        "fishbase": {
            "enabled": True,
            "limit": 50,
        },
    },
    "api": {
        "timeout": 30,
        "max_retries": 3,
        "requests_per_second": 2.0,
        "user_agent": "oceanvision/0.1 (marine species catalog)",
    },
    "logging": {
        "level": "WARNING",
    },
}

# Standard config file locations, highest priority first
CONFIG_LOCATIONS = [
    Path("oceanvision.toml"),
    Path("~/.config/oceanvision/config.toml").expanduser(),
    Path("/etc/oceanvision/config.toml"),
]


@dataclass
class Config:
    """
    Configuration container for oceanvision settings.

    Attributes:
        catalog: Store mode, cache window and worker settings
        sources: Per-upstream-source settings keyed by source name
        api: HTTP client settings (timeouts, retries, rate limits)
        logging: Logging settings
        _source: Path to the config file that was loaded
    """

    catalog: Dict[str, Any] = field(default_factory=dict)
    sources: Dict[str, Any] = field(default_factory=dict)
    api: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        if section_dict is None:
            return default
        return section_dict.get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if section_dict is not None:
            section_dict[key] = value

    def source_settings(self, name: str) -> Dict[str, Any]:
        """Get the settings table for one upstream source."""
        return dict(self.sources.get(name, {}) or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "catalog": self.catalog,
            "sources": self.sources,
            "api": self.api,
            "logging": self.logging,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            catalog=data.get("catalog", {}),
            sources=data.get("sources", {}),
            api=data.get("api", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If TOML parsing fails
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with open(path, "rb") as f:
        return tomllib.load(f)


_TOML_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return '"' + "".join(_TOML_ESCAPES.get(c, c) for c in value) + '"'
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return str(value)


def _table_lines(prefix: str, values: Dict[str, Any]) -> List[str]:
    """Render one TOML table, followed by its sub-tables."""
    lines = [f"[{prefix}]"]
    nested = []
    for key, value in values.items():
        if isinstance(value, dict):
            nested.append((key, value))
        elif value is not None:
            lines.append(f"{key} = {_format_value(value)}")
    lines.append("")
    for key, value in nested:
        lines.extend(_table_lines(f"{prefix}.{key}", value))
    return lines


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Args:
        config: Configuration dictionary
        filepath: Path to save the file

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines: List[str] = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.extend(_table_lines(section, values))

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return str(path)


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./oceanvision.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "oceanvision.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two dictionaries, with override taking precedence."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def get_config_locations() -> List[Path]:
    """
    Get configuration file search locations in priority order.

    Returns:
        List of paths to search, in priority order (highest first)
    """
    return CONFIG_LOCATIONS.copy()


def load_config_cascade(explicit_path: Optional[str] = None) -> Config:
    """
    Load configuration with full cascade support.

    Merges configs from all levels in priority order:
    defaults -> system -> user -> current dir -> explicit

    Args:
        explicit_path: Explicit config file path (highest priority)

    Returns:
        Config object with merged settings from all sources
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)
    source = None

    paths = list(reversed(get_config_locations()))
    if explicit_path:
        if Path(explicit_path).exists():
            paths.append(Path(explicit_path))
        else:
            logger.warning(f"Specified config file not found: {explicit_path}")

    for location in paths:
        if not location.exists():
            continue
        try:
            config_data = _merge_dicts(config_data, load_toml(location))
            source = str(location)
            logger.debug(f"Merged configuration from {location}")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading {location}: {e}")

    mode = config_data["catalog"].get("mode")
    if mode not in CATALOG_MODES:
        logger.warning(f"Unknown catalog mode {mode!r}, using 'static'")
        config_data["catalog"]["mode"] = "static"

    return Config.from_dict(config_data, source=source)


# Global configuration instance
_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = load_config_cascade()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to None (will reload on next access)."""
    global _global_config
    _global_config = None
