# services/config.py
"""
Service for configuration management operations.
"""

from pathlib import Path
from typing import List, Optional

from oceanvision.core.config import (
    Config,
    create_default_config_file,
    get_config,
    get_config_locations,
)

from .base import BaseService, ServiceResult


class ConfigService(BaseService):
    """
    Service for configuration management operations.

    Provides ServiceResult-wrapped methods for configuration access
    and management.
    """

    def get_config(self) -> ServiceResult[Config]:
        """Get the current configuration."""
        try:
            config = get_config()
            return ServiceResult.ok(
                data=config,
                message=f"Loaded config from {config._source or 'defaults'}",
            )
        except Exception as e:
            return ServiceResult.fail(f"Failed to get config: {e}")

    def get_config_locations(self) -> ServiceResult[List[str]]:
        """Get configuration file search locations in priority order."""
        locations = [str(path) for path in get_config_locations()]
        return ServiceResult.ok(data=locations, message=f"{len(locations)} config locations")

    def create_default_config(
        self,
        output_path: Optional[str] = None,
        force: bool = False,
    ) -> ServiceResult[str]:
        """
        Write a configuration file containing the built-in defaults.

        Args:
            output_path: Destination (default: ./oceanvision.toml)
            force: Overwrite an existing file
        """
        path = output_path or "oceanvision.toml"
        error = self._validate_output_path(path, allow_overwrite=force)
        if error:
            return ServiceResult.fail(f"{error} (use --force to overwrite)")

        try:
            written = create_default_config_file(path)
        except OSError as e:
            return ServiceResult.fail(f"Failed to write config: {e}")
        return ServiceResult.ok(data=written, message=f"Created {Path(written).name}")
