"""Species catalog commands."""

import json
from typing import Optional

import click


@click.group()
def species() -> None:
    """Search and explore the marine species catalog."""
    pass


@species.command("search")
@click.argument("query", required=False, default="")
@click.option("--habitat", default=None, help="Habitat substring, e.g. 'reef'")
@click.option("--status", default=None, help="Conservation status substring, e.g. 'endangered'")
@click.option("--min-depth", type=float, default=None, help="Minimum depth in meters")
@click.option("--max-depth", type=float, default=None, help="Maximum depth in meters")
@click.option("--diet", default=None, help="Diet substring, e.g. 'krill'")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def species_search(
    query: str,
    habitat: Optional[str],
    status: Optional[str],
    min_depth: Optional[float],
    max_depth: Optional[float],
    diet: Optional[str],
    output_format: str,
) -> None:
    """Search species by name, optionally narrowed by filters.

    With no query and no filters a random selection is shown. The depth
    filter applies only when both --min-depth and --max-depth are given.
    """
    from oceanvision.cli.display import console, species_table
    from oceanvision.cli.service_helpers import handle_result, services
    from oceanvision.models.species import SearchCriteria

    criteria = SearchCriteria(
        habitat=habitat,
        conservation_status=status,
        min_depth=min_depth,
        max_depth=max_depth,
        diet=diet,
    )
    if (min_depth is None) != (max_depth is None):
        click.echo(
            "Note: the depth filter needs both --min-depth and --max-depth; ignoring it.",
            err=True,
        )

    result = services.species.browse(query=query, criteria=criteria)
    records = handle_result(result)

    if not records:
        click.echo(f'No species found matching "{query}".' if query else "No species found.")
        return

    if output_format == "json":
        click.echo(json.dumps([record.to_dict() for record in records], indent=2))
    else:
        console.print(species_table(records, title=result.message or "Species"))


@species.command("show")
@click.argument("species_id")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def species_show(species_id: str, output_format: str) -> None:
    """Show full details for one species."""
    from oceanvision.cli.display import console, species_panel
    from oceanvision.cli.service_helpers import handle_result, services

    record = handle_result(services.species.get(species_id))

    if output_format == "json":
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        console.print(species_panel(record))


@species.command("random")
@click.option("--count", "-n", type=int, default=1, show_default=True, help="Number of species")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def species_random(count: int, output_format: str) -> None:
    """Show randomly selected species."""
    from oceanvision.cli.display import console, species_table
    from oceanvision.cli.service_helpers import handle_result, services

    records = handle_result(services.species.random(count))
    if not records:
        click.echo("The catalog is empty.")
        return

    if output_format == "json":
        click.echo(json.dumps([record.to_dict() for record in records], indent=2))
    else:
        console.print(species_table(records, title="Random species"))


@species.command("stats")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def species_stats(output_format: str) -> None:
    """Show catalog statistics."""
    from oceanvision.cli.display import console, statistics_table
    from oceanvision.cli.service_helpers import handle_result, services

    stats = handle_result(services.species.statistics())

    if output_format == "json":
        click.echo(json.dumps(stats.to_dict(), indent=2))
    else:
        console.print(statistics_table(stats))


@species.command("export")
@click.argument("output")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "csv"]),
    default=None,
    help="Output format (default: from file extension, else json)",
)
def species_export(output: str, fmt: Optional[str]) -> None:
    """Export the whole catalog to a JSON or CSV file."""
    from oceanvision.cli.service_helpers import handle_result, services

    if fmt is None:
        fmt = "csv" if output.lower().endswith(".csv") else "json"

    result = services.species.export(output, format=fmt)
    handle_result(result)
    click.echo(result.message)


@species.command("refresh")
def species_refresh() -> None:
    """Reload the catalog from upstream sources (dynamic mode)."""
    from oceanvision.cli.display import console
    from oceanvision.cli.service_helpers import handle_result, services

    result = services.species.refresh()
    status = handle_result(result)

    console.print(f"[bold]{result.message}[/bold]")
    for report in status.get("reports", []):
        if report.get("error"):
            console.print(f"  [red]✗[/red] {report['name']}: {report['error']}")
        else:
            console.print(f"  [green]✓[/green] {report['name']}: {report['record_count']} records")
    if status.get("last_updated"):
        console.print(f"[dim]Cache updated {status['last_updated']}[/dim]")
