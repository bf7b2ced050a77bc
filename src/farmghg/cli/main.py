from __future__ import annotations

import logging
from pathlib import Path

import click
import typer
from rich.console import Console
from rich.table import Table

from farmghg.core.errors import MissingReferenceDataError
from farmghg.farm.contract import HardinessZone, TreeSpecies
from farmghg.farm.io import load_farm
from farmghg.initialization import InitializationService
from farmghg.reference import ShelterbeltColumn, get_interpolated_value
from farmghg.results import FarmEmissionResults
from farmghg.results.pipeline import FarmResultsService
from farmghg.settings import load_settings

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
SHELTERBELT_COLUMN = click.Choice([c.value for c in ShelterbeltColumn], case_sensitive=False)
TREE_SPECIES = click.Choice([s.value for s in TreeSpecies], case_sensitive=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_results(results: FarmEmissionResults) -> None:
    name = results.farm.name if results.farm is not None else "-"
    summary = Table(title=f"Farm: {name}")
    summary.add_column("Metric")
    summary.add_column("Value", justify="right")
    for key, value in results.summary_metrics().items():
        summary.add_row(key, f"{value:.3f}")
    console.print(summary)

    tanks = Table(title="Manure tanks (kg N)")
    tanks.add_column("Category")
    tanks.add_column("Organic N", justify="right")
    tanks.add_column("TAN", justify="right")
    tanks.add_column("Before", justify="right")
    tanks.add_column("Applied", justify="right")
    tanks.add_column("After", justify="right")
    for tank in results.manure_tanks:
        tanks.add_row(
            tank.component_category.value,
            f"{tank.total_organic_nitrogen_available_for_land_application:.3f}",
            f"{tank.total_tan_available_for_land_application:.3f}",
            f"{tank.total_available_manure_nitrogen_before_land_applications:.3f}",
            f"{tank.nitrogen_sum_of_all_manure_applications_made:.3f}",
            f"{tank.total_available_manure_nitrogen_after_all_land_applications:.3f}",
        )
    console.print(tanks)


@app.command()
def results(
    farm_yaml: Path,
    reinitialize: bool = typer.Option(
        True, "--reinitialize/--no-reinitialize", help="Refresh defaults before calculating."
    ),
    telemetry_log: Path | None = typer.Option(
        None, "--telemetry-log", help="Append a JSONL run record to this file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Calculate and print the emission results of a farm YAML."""
    _configure_logging(verbose)
    farm = load_farm(farm_yaml)
    settings = load_settings(farm_yaml)
    if telemetry_log is not None:
        settings = settings.model_copy(update={"telemetry_log": telemetry_log})

    if reinitialize:
        try:
            InitializationService().reinitialize_farms([farm])
        except MissingReferenceDataError as exc:
            console.print(f"[red]Initialization failed:[/red] {exc}")
            raise typer.Exit(1)

    service = FarmResultsService(settings=settings)
    outcome = service.calculate_farm_emission_results(farm)
    if outcome.is_empty and farm.polygon_id == 0:
        console.print("[yellow]Farm has no polygon id; nothing was calculated.[/]")
        raise typer.Exit(1)
    _print_results(outcome)
    if settings.telemetry_log is not None:
        console.print(f"[dim]Telemetry appended to {settings.telemetry_log}[/]")


@app.command()
def init(
    farm_yaml: Path,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Initialize a farm from the default tables and print the management period values."""
    _configure_logging(verbose)
    farm = load_farm(farm_yaml)
    try:
        InitializationService().reinitialize_farms([farm])
    except MissingReferenceDataError as exc:
        console.print(f"[red]Initialization failed:[/red] {exc}")
        raise typer.Exit(1)

    t = Table(title=f"Initialized farm: {farm.name}")
    t.add_column("Group")
    t.add_column("Period")
    t.add_column("N frac", justify="right")
    t.add_column("MCF", justify="right")
    t.add_column("Bo", justify="right")
    t.add_column("Mineralized", justify="right")
    t.add_column("Milk", justify="right")
    for component in farm.animal_components:
        for group in component.groups:
            for period in group.management_periods:
                details = period.manure_details
                t.add_row(
                    group.name,
                    period.name,
                    f"{details.fraction_of_nitrogen_in_manure:.4f}",
                    f"{details.methane_conversion_factor:.4f}",
                    f"{details.methane_producing_capacity_of_manure:.3f}",
                    f"{details.fraction_of_organic_nitrogen_mineralized:.3f}",
                    f"{period.milk_production:.2f}",
                )
    console.print(t)


@app.command()
def shelterbelt(
    species: str = typer.Argument(..., click_type=TREE_SPECIES),
    ecodistrict: int = typer.Argument(...),
    age: int = typer.Argument(...),
    mortality: float = typer.Argument(...),
    low: float = typer.Option(0.0, "--low", help="Lower tabulated mortality (%)."),
    high: float = typer.Option(15.0, "--high", help="Upper tabulated mortality (%)."),
    year: int = typer.Option(2016, "--year", help="Year selecting the past/future regime."),
    column: str = typer.Option(
        ShelterbeltColumn.TEC_MG_C_KM.value,
        "--column",
        help="Carbon metric to interpolate.",
        show_choices=True,
        click_type=SHELTERBELT_COLUMN,
    ),
    zone: str = typer.Option(HardinessZone.ZONE_3A.value, "--zone", help="Hardiness zone."),
):
    """Interpolate a shelterbelt carbon metric between two mortality levels."""
    value = get_interpolated_value(
        TreeSpecies(species.lower()),
        HardinessZone(zone.lower()),
        ecodistrict,
        mortality,
        low,
        high,
        age,
        ShelterbeltColumn(column.lower()),
        year,
    )
    console.print(f"{column.lower()}: {value:.4f}")


if __name__ == "__main__":
    app()
