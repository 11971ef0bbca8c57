"""Configuration management commands."""

from typing import Optional

import click


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from oceanvision.cli.display import console
    from oceanvision.cli.service_helpers import handle_result, services

    config_obj = handle_result(services.config.get_config())

    console.print("\n[bold]Current Configuration[/bold]")
    console.print(f"[dim]Source: {config_obj._source or 'defaults'}[/dim]\n")

    def _print_section(name: str, values: dict, indent: int = 0) -> None:
        pad = "  " * indent
        console.print(f"{pad}[cyan]\\[{name}][/cyan]")
        for key, value in values.items():
            if isinstance(value, dict):
                _print_section(f"{name}.{key}", value, indent + 1)
            else:
                console.print(f"{pad}  {key} = {value}")

    for section, values in config_obj.to_dict().items():
        _print_section(section, values)
    console.print()


@config.command("path")
def config_path() -> None:
    """Show configuration file search locations."""
    from oceanvision.cli.service_helpers import handle_result, services

    for location in handle_result(services.config.get_config_locations()):
        click.echo(location)


@config.command("init")
@click.argument("output", required=False, default=None)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(output: Optional[str], force: bool) -> None:
    """Write a configuration file with default settings."""
    from oceanvision.cli.service_helpers import handle_result, services

    path = handle_result(services.config.create_default_config(output, force=force))
    click.echo(f"Created configuration file: {path}")
