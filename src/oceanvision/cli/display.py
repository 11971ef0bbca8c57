"""
Rich-based console output for species listings, details and statistics.
"""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from oceanvision.models.species import CatalogStatistics, Range, SpeciesRecord

# Global console instance
console = Console()

STATUS_STYLES = [
    ("critically endangered", "bold red"),
    ("endangered", "red"),
    ("vulnerable", "dark_orange"),
    ("near threatened", "yellow"),
    ("least concern", "green"),
]


def status_style(status: str) -> str:
    """Rich style for a conservation status, most severe match first."""
    lowered = status.lower()
    for needle, style in STATUS_STYLES:
        if needle in lowered:
            return style
    return "dim"


def format_range(value: Range) -> str:
    low = f"{value.min:g}"
    high = f"{value.max:g}"
    return f"{low}-{high} {value.unit}" if low != high else f"{low} {value.unit}"


def species_table(records: List[SpeciesRecord], title: str = "Species") -> Table:
    """Build a summary table, one row per species."""
    table = Table(title=title, show_lines=False)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Common name")
    table.add_column("Scientific name", style="italic")
    table.add_column("Status")
    table.add_column("Depth", justify="right")
    table.add_column("Habitat")

    for record in records:
        status = record.conservation_status
        table.add_row(
            record.id,
            record.common_name,
            record.scientific_name,
            f"[{status_style(status)}]{status}[/]",
            format_range(record.depth),
            ", ".join(record.habitat),
        )
    return table


def species_panel(record: SpeciesRecord) -> Panel:
    """Build a detail panel for one species."""
    lines = [
        f"[italic]{record.scientific_name}[/italic]",
        "",
        f"[bold]Taxonomy:[/bold] {record.kingdom} > {record.phylum} > {record.order} > {record.family}",
        f"[bold]Status:[/bold] [{status_style(record.conservation_status)}]"
        f"{record.conservation_status}[/]",
        f"[bold]Habitat:[/bold] {', '.join(record.habitat)}",
        f"[bold]Depth:[/bold] {format_range(record.depth)}",
        f"[bold]Distribution:[/bold] {', '.join(record.distribution)}",
        f"[bold]Length:[/bold] {format_range(record.size.length)}",
    ]
    if record.size.weight:
        lines.append(f"[bold]Weight:[/bold] {format_range(record.size.weight)}")
    lines.extend(
        [
            f"[bold]Diet:[/bold] {', '.join(record.diet)}",
            f"[bold]Lifespan:[/bold] {record.lifespan:g} years",
            "",
            escape(record.description),
        ]
    )
    if record.facts:
        lines.append("")
        lines.append("[bold]Facts:[/bold]")
        lines.extend(f"  • {escape(fact)}" for fact in record.facts)
    if record.threats:
        lines.append(f"[bold]Threats:[/bold] {', '.join(record.threats)}")
    if record.discovery_year:
        where = f", {record.discovery_location}" if record.discovery_location else ""
        lines.append(f"[bold]Described:[/bold] {record.discovery_year}{where}")
    lines.append(f"[dim]Sources: {', '.join(record.sources)} (updated {record.last_updated})[/dim]")

    return Panel("\n".join(lines), title=f"[bold]{record.common_name}[/bold]", expand=False)


def statistics_table(stats: CatalogStatistics) -> Table:
    """Build a table of catalog statistics."""
    table = Table(title="Catalog Statistics", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Total species", str(stats.total_species))
    average = (
        f"{stats.average_lifespan:.1f} years" if stats.average_lifespan is not None else "n/a"
    )
    table.add_row("Average lifespan", average)
    table.add_row("Last updated", stats.last_updated or "n/a")
    table.add_row("Sources", ", ".join(stats.sources) or "n/a")
    table.add_section()
    for status, count in sorted(stats.conservation_counts.items(), key=lambda x: -x[1]):
        table.add_row(f"[{status_style(status)}]{status}[/]", str(count))
    table.add_section()
    for habitat, count in sorted(stats.habitat_counts.items(), key=lambda x: (-x[1], x[0])):
        table.add_row(habitat, str(count))
    return table
