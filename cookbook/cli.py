"""Typer CLI for cookbook-scraper (import-url, convert, scale, duration)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from dotenv import load_dotenv
# load .env immediately so subsequent imports (which read settings at import time)
# pick up values from the .env file
load_dotenv()

import logging
from cookbook.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """Send app logs to stderr, and to `log_file` as well when one is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


# before the imports below so their module loggers inherit it
configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

from cookbook.export.text_export import create_json, create_text
from cookbook.models.recipe_schema import NUTRITION_LABELS, RecipeRecord
from cookbook.orchestrate import run as orchestrator
from cookbook.settings import validate_settings
from cookbook.units.duration import DurationComponents
from cookbook.units.measurement import MeasurementUnit, convert as convert_units
from cookbook.units.quantity import rescale

app = typer.Typer()
console = Console()

FORMATS = ("table", "text", "json")


def _recipe_table(recipe: RecipeRecord, unscaled: list[str]) -> Table:
    table = Table(title=recipe.name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    if recipe.description:
        table.add_row("Description", recipe.description)
    if recipe.category:
        table.add_row("Category", recipe.category)
    if recipe.keywords:
        table.add_row("Keywords", ", ".join(recipe.keyword_list()))
    table.add_row("Yield", str(recipe.recipe_yield) if recipe.recipe_yield else "-")
    for label, value in (
        ("Preparation time", recipe.prep_time),
        ("Cooking time", recipe.cook_time),
        ("Total time", recipe.total_time),
    ):
        if value:
            table.add_row(label, DurationComponents.parse(value).to_display_text())
    lines = []
    for ingredient in recipe.ingredients:
        # lines we could not rescale are highlighted
        lines.append(f"[yellow]{ingredient}[/yellow]" if ingredient in unscaled else ingredient)
    table.add_row("Ingredients", "\n".join(lines))
    steps = [f"{n}. {step}" for n, step in enumerate(recipe.instructions, start=1)]
    table.add_row("Instructions", "\n".join(steps))
    if recipe.tools:
        table.add_row("Tools", "\n".join(recipe.tools))
    for key, value in recipe.nutrition.items():
        if key in NUTRITION_LABELS:
            table.add_row(NUTRITION_LABELS[key], value)
    if recipe.source_url:
        table.add_row("Source", recipe.source_url)
    return table


@app.command("import-url")
def import_url(
    url: str,
    servings: Optional[float] = typer.Option(None, help="Rescale ingredients to this many servings."),
    fmt: str = typer.Option("table", "--format", help="table, text or json"),
    out: Optional[Path] = typer.Option(None, help="Write text/json output to this file."),
):
    """Import the recipe published on a web page."""
    if fmt not in FORMATS:
        console.print(f"[red]Error:[/red] unknown format {fmt!r}; use one of {', '.join(FORMATS)}")
        raise typer.Exit(code=1)
    result = orchestrator.url_to_recipe(url, servings=servings)
    if not result.ok:
        console.print(f"[red]{result.error.title}:[/red] {result.error.description}")
        raise typer.Exit(code=1)
    if fmt == "table":
        console.print(_recipe_table(result.record, result.unscaled))
        return
    rendered = create_json(result.record) if fmt == "json" else create_text(result.record)
    if out:
        out.write_text(rendered, encoding="utf-8")
        console.print(f"Wrote {out}")
    else:
        console.print(rendered, markup=False, highlight=False, soft_wrap=True)


@app.command()
def convert(value: float, from_unit: str, to_unit: str):
    """Convert a quantity between two units of the same family."""
    try:
        source = MeasurementUnit.from_text(from_unit)
        target = MeasurementUnit.from_text(to_unit)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    result = convert_units(value, source, target)
    if result is None:
        console.print(
            f"[red]Error:[/red] cannot convert {source.value} ({source.family.name.lower()}) "
            f"to {target.value} ({target.family.name.lower()})"
        )
        raise typer.Exit(code=1)
    console.print(f"{value:g} {source.value} = {result:g} {target.value}")


@app.command()
def scale(ingredient: str, factor: float):
    """Multiply the leading quantity of an ingredient line."""
    scaled = rescale(ingredient, factor)
    if scaled == ingredient and factor != 1:
        console.print(f"[yellow]{ingredient}[/yellow]", highlight=False)
    else:
        console.print(scaled, markup=False, highlight=False, soft_wrap=True)


@app.command()
def duration(pt: str):
    """Show a PT duration string (e.g. PT1H30M0S) in readable form."""
    console.print(DurationComponents.parse(pt).to_display_text())


@app.callback()
def main():
    try:
        validate_settings()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
