"""
CLI Service Helpers
===================

CLI-specific utilities for working with the ServiceFactory.

- Module-level factory shared by all commands, built lazily on first access
- set_factory() to inject a prebuilt factory, mainly in tests
- close_factory() releases its HTTP session when the command group exits
- Result handling that turns failed ServiceResults into a clean exit

Usage:
    from oceanvision.cli.service_helpers import handle_result, services

    species = handle_result(services.species.get("blue-whale"))
"""

from typing import TYPE_CHECKING, Optional, TypeVar

import click

if TYPE_CHECKING:
    from oceanvision.services import ConfigService, ServiceFactory, SpeciesService
    from oceanvision.services.base import ServiceResult

T = TypeVar("T")

_factory: "Optional[ServiceFactory]" = None


def get_factory() -> "ServiceFactory":
    """
    Get the shared ServiceFactory instance for CLI.

    Lazily initialized on first access from the global configuration.
    """
    global _factory
    if _factory is None:
        from oceanvision.services import ServiceFactory

        _factory = ServiceFactory()
    return _factory


def set_factory(factory: "Optional[ServiceFactory]") -> None:
    """
    Set a custom ServiceFactory instance, or None to rebuild on next access.

    Example:
        # In tests
        set_factory(ServiceFactory(config=get_default_config(), store=my_store))
    """
    global _factory
    _factory = factory


def close_factory() -> None:
    """Close the shared factory, if one was built, and forget it."""
    global _factory
    if _factory is not None:
        _factory.close()
        _factory = None


class _ServiceAccessor:
    """Lazy property access to the shared factory's services."""

    @property
    def species(self) -> "SpeciesService":
        """Get SpeciesService instance."""
        return get_factory().species

    @property
    def config(self) -> "ConfigService":
        """Get ConfigService instance."""
        return get_factory().config_service


services = _ServiceAccessor()


def handle_result(result: "ServiceResult[T]") -> T:
    """
    Handle a service result, exiting with error if failed.

    Warnings on a successful result are echoed to stderr.

    Raises:
        SystemExit: If result indicates failure (exits with code 1)
    """
    if not result.success:
        exit_with_error(result.error or "Unknown error")
    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)
    return result.data


def exit_with_error(message: str, code: int = 1) -> None:
    """
    Print error message and exit.

    Raises:
        SystemExit: Always exits with specified code
    """
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)
