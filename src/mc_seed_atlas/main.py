"""CLI startup entrypoint for MC Seed Atlas."""

from __future__ import annotations

import json
from typing import Iterable, List, Optional

import typer
from rich import print
from rich.table import Table

from mc_seed_atlas.analyzer import SeedAnalyzer
from mc_seed_atlas.cli import CliAnalysisHandler
from mc_seed_atlas.config import parse_structure_kinds, settings
from mc_seed_atlas.export import JsonlCoordinateExporter
from mc_seed_atlas.models import AnalysisOptions, PredictedStructure, SeedAnalysisResult
from mc_seed_atlas.telemetry import LoggingTelemetry, configure_logging
from mc_seed_atlas.world_locator import SeedAnalysisLocator

app = typer.Typer(help="MC Seed Atlas: predict structures and biomes from a world seed")


@app.callback()
def _configure() -> None:
    configure_logging(settings.log_level)


def _build_analyzer(radius: int | None = None, kinds: str | None = None) -> SeedAnalyzer:
    try:
        options = settings.analysis_options()
        if radius is not None or kinds is not None:
            options = AnalysisOptions(
                search_radius_chunks=options.search_radius_chunks if radius is None else radius,
                structure_kinds=options.structure_kinds if kinds is None else parse_structure_kinds(kinds),
            )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    telemetry = LoggingTelemetry() if settings.telemetry_enabled else None
    return SeedAnalyzer(options, telemetry=telemetry)


def _build_handler(radius: int | None = None, kinds: str | None = None) -> CliAnalysisHandler:
    return CliAnalysisHandler(_build_analyzer(radius=radius, kinds=kinds))


def _structure_table(title: str, result_rows: Iterable[PredictedStructure]) -> Table:
    table = Table(title=title)
    for column in ("Name", "X", "Y", "Z", "Distance", "Confidence"):
        table.add_column(column)
    for item in result_rows:
        table.add_row(
            item.name,
            str(item.x),
            "-" if item.y is None else str(item.y),
            str(item.z),
            str(item.distance),
            f"{item.confidence:.0%}",
        )
    return table


def _print_result(result: SeedAnalysisResult) -> None:
    spawn = result.spawn_point
    print(
        {
            "seed": result.seed,
            "seed_value": result.seed_value,
            "spawn_point": {"x": spawn.x, "y": spawn.y, "z": spawn.z},
            "spawn_fallback": spawn.fallback,
        }
    )
    print(_structure_table("Nearby structures", result.nearby_structures))
    print(_structure_table("Strongholds", result.strongholds))
    print([biome.to_dict() for biome in result.biome_predictions])


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "search_radius_chunks": settings.search_radius_chunks,
            "structure_kinds": settings.structure_kinds,
            "export_path": settings.export_path,
        }
    )


@app.command()
def analyze(
    seed: str = typer.Argument(..., help="World seed, numeric or text"),
    radius: Optional[int] = typer.Option(None, min=0, help="Search radius in chunks"),
    kinds: Optional[str] = typer.Option(None, help="Comma separated structure kinds, or 'all'"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """Predict spawn, structures, strongholds and rare biomes."""
    result = _build_handler(radius=radius, kinds=kinds).analyze(seed)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return
    _print_result(result)


@app.command()
def strongholds(seed: str = typer.Argument(..., help="World seed, numeric or text")) -> None:
    result = _build_handler().analyze(seed)
    print({"strongholds": [structure.to_dict() for structure in result.strongholds]})


@app.command()
def biomes(seed: str = typer.Argument(..., help="World seed, numeric or text")) -> None:
    result = _build_handler().analyze(seed)
    print({"biomes": [biome.to_dict() for biome in result.biome_predictions]})


@app.command()
def coordinates(
    seed: str = typer.Argument(..., help="World seed, numeric or text"),
    world_id: int = typer.Option(..., help="World the records belong to"),
    structure_type: Optional[List[str]] = typer.Option(
        None, "--type", help="Location type or category to keep (repeatable)"
    ),
    output: Optional[str] = typer.Option(None, help="Append records to this JSONL file"),
) -> None:
    """Map predicted structures to coordinate records."""
    records = _build_handler().coordinates(seed, world_id, structure_type)
    target = output or settings.export_path
    if target:
        written = JsonlCoordinateExporter(target).append(records)
        print({"exported": written, "path": target})
        return
    typer.echo(json.dumps([record.to_dict() for record in records], indent=2))


@app.command()
def exported(
    path: Optional[str] = typer.Option(None, help="JSONL file written by 'coordinates'"),
    world_id: Optional[int] = typer.Option(None, help="Only show records for this world"),
) -> None:
    """List coordinate records from an export file."""
    source = path or settings.export_path
    if not source:
        raise typer.BadParameter("No export path given and MC_SEED_ATLAS_EXPORT_PATH is unset")

    records = JsonlCoordinateExporter(source).read_all()
    if world_id is not None:
        records = [record for record in records if record.world_id == world_id]
    if not records:
        print({"exported": []})
        raise typer.Exit(code=1)

    table = Table(title=f"Exported coordinates ({source})")
    for column in ("World", "Name", "X", "Y", "Z", "Dimension", "Tags"):
        table.add_column(column)
    for record in records:
        table.add_row(
            str(record.world_id),
            record.name,
            str(record.x),
            str(record.y),
            str(record.z),
            record.dimension.value,
            ", ".join(record.tags),
        )
    print(table)


@app.command("nearest-structure")
def nearest_structure(
    seed: str = typer.Option(..., help="World seed, numeric or text"),
    structure: str = typer.Option(..., help="Structure type, e.g. village"),
    x: int = typer.Option(0, help="Current X"),
    z: int = typer.Option(0, help="Current Z"),
    dimension: str = typer.Option("overworld", help="overworld/nether/end"),
) -> None:
    locator = SeedAnalysisLocator(_build_analyzer())
    location = locator.nearest_structure(seed=seed, structure=structure, x=x, z=z, dimension=dimension)
    if location is None:
        print({"nearest_structure": None})
        raise typer.Exit(code=1)
    print({"nearest_structure": location})


@app.command("nearest-biome")
def nearest_biome(
    seed: str = typer.Option(..., help="World seed, numeric or text"),
    biome: str = typer.Option(..., help="Biome name, e.g. cherry_grove"),
    x: int = typer.Option(0, help="Current X"),
    z: int = typer.Option(0, help="Current Z"),
    dimension: str = typer.Option("overworld", help="overworld/nether/end"),
) -> None:
    locator = SeedAnalysisLocator(_build_analyzer())
    location = locator.nearest_biome(seed=seed, biome=biome, x=x, z=z, dimension=dimension)
    if location is None:
        print({"nearest_biome": None})
        raise typer.Exit(code=1)
    print({"nearest_biome": location})


if __name__ == "__main__":
    app()
