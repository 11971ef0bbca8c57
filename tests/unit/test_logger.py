"""
Unit tests for oceanvision.core.logger module.
"""

import logging

import pytest

from oceanvision.core import config as config_module
from oceanvision.core.catalog import sources as sources_module
from oceanvision.core.http import client as client_module
from oceanvision.core.logger import PACKAGE_NAME, get_logger, set_level
from oceanvision.services import species as species_module


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_NAME)
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestGetLogger:
    """Tests for module loggers."""

    def test_package_handler_installed(self, package_logger):
        """Test that the first logger installs one stderr handler."""
        get_logger("oceanvision.tests")

        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False

    @pytest.mark.parametrize(
        "module", [config_module, sources_module, client_module, species_module]
    )
    def test_modules_log_under_package(self, module, package_logger):
        """Test that module loggers inherit the package level and handler."""
        set_level("ERROR")

        assert module.logger.name.startswith(f"{PACKAGE_NAME}.")
        assert module.logger.getEffectiveLevel() == logging.ERROR


class TestSetLevel:
    """Tests for set_level."""

    def test_level_name_is_case_insensitive(self, package_logger):
        """Test that lowercase names from config files are accepted."""
        set_level("debug")

        assert package_logger.level == logging.DEBUG

    def test_unknown_name_falls_back_to_warning(self, package_logger):
        """Test that a typo in [logging].level does not break logging."""
        set_level("loud")

        assert package_logger.level == logging.WARNING
