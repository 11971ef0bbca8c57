"""
OceanVision CLI - Marine Species Catalog
"""

from typing import Optional

import click

from oceanvision import __version__

from .commands import config, species


@click.group()
@click.version_option(version=__version__, prog_name="oceanvision")
@click.option("--config", "config_path", default=None, help="Path to a TOML config file")
@click.option(
    "--mode",
    type=click.Choice(["static", "dynamic"]),
    default=None,
    help="Catalog mode (overrides [catalog].mode)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], mode: Optional[str], verbose: bool) -> None:
    """OceanVision - marine species catalog

    Use 'oceanvision COMMAND --help' for more information on a command.
    """
    from oceanvision.cli.service_helpers import close_factory
    from oceanvision.core.config import get_config, load_config_cascade, set_config
    from oceanvision.core.logger import set_level

    if config_path:
        set_config(load_config_cascade(config_path))
    cfg = get_config()
    if mode:
        cfg.set("catalog", "mode", mode)

    set_level("DEBUG" if verbose else cfg.get("logging", "level", "WARNING"))
    ctx.call_on_close(close_factory)


# Register command groups
cli.add_command(config)
cli.add_command(species)


if __name__ == "__main__":
    cli()
