"""
ChefIQ Analyzer - CLI Entry Point.

Usage:
    chefiq analyze recipe.json         Analyze a recipe file
    chefiq analyze -t "Ribs" -s "..."  Analyze steps given inline
    chefiq temperature "..."           Extract a temperature from text
    chefiq cook-time "..." "..."       Extract cooking time from steps
    chefiq methods                     List known cooking methods
    chefiq health                      Check configuration
    chefiq --help                      Show help
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="chefiq",
    help="ChefIQ Analyzer - Suggest ChefIQ appliance settings from recipe text.",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool = False) -> None:
    from chefiq_analyzer.config import settings

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    recipe_file: Optional[Path] = typer.Argument(None, help="Recipe JSON file with title, description, instructions and cook_time_minutes"),
    title: str = typer.Option("", "--title", "-t", help="Recipe title"),
    description: str = typer.Option("", "--description", "-d", help="Recipe description"),
    steps: Optional[List[str]] = typer.Option(None, "--step", "-s", help="Instruction step (repeatable)"),
    cook_time: int = typer.Option(0, "--cook-time", "-c", help="Total cook time in minutes"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Analyze a recipe and suggest ChefIQ cooking actions."""
    from chefiq_analyzer.analysis import analyze_recipe_for_chefiq
    from chefiq_analyzer.core.catalog import get_default_catalog
    from chefiq_analyzer.exceptions import ChefIQAnalyzerError
    from chefiq_analyzer.recipe_input import load_recipe_input

    _configure_logging(verbose)

    try:
        if recipe_file:
            recipe = load_recipe_input(recipe_file)
            title = recipe.title
            description = recipe.description
            steps = recipe.instructions
            cook_time = cook_time or recipe.cook_time_minutes
        elif not steps:
            console.print("[red]❌ Provide a recipe file or at least one --step.[/red]")
            raise typer.Exit(1)
        catalog = get_default_catalog()
    except ChefIQAnalyzerError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    result = analyze_recipe_for_chefiq(title, description, list(steps), cook_time, catalog=catalog)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    _print_result(result, catalog, title or "Untitled recipe")


def _print_result(result, catalog, title: str) -> None:
    from chefiq_analyzer.formatters import describe_parameters

    appliance = catalog.by_id(result.suggested_appliance) if result.suggested_appliance else None
    summary = [
        f"[bold]{title}[/bold]",
        f"Appliance: {appliance.name if appliance else '-'}",
        f"Confidence: {result.confidence:.0%}",
    ]
    if result.use_probe:
        summary.append(f"Probe: {result.probe_temp}°F")
    console.print(Panel.fit("\n".join(summary), title="ChefIQ Suggestion", border_style="green"))

    if result.suggested_actions:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Step", justify="right")
        table.add_column("Method")
        table.add_column("Settings")
        for action in result.suggested_actions:
            step = "-" if action.step_index is None else str(action.step_index + 1)
            table.add_row(step, action.method_name, ", ".join(describe_parameters(action.parameters)))
        console.print(table)
    else:
        console.print("[dim]No ChefIQ actions suggested.[/dim]")

    console.print("\n[bold]Reasoning[/bold]")
    for line in result.reasoning:
        console.print(f"  • {line}")


@app.command()
def temperature(
    text: str = typer.Argument(..., help="Recipe text"),
    no_initial: bool = typer.Option(False, "--no-initial", help="Don't prefer the preheat temperature"),
) -> None:
    """Extract the main oven temperature from text."""
    from chefiq_analyzer.analysis import extract_temperature

    temp = extract_temperature(text, prefer_initial=not no_initial)
    if temp is None:
        console.print("[dim]No oven temperature found.[/dim]")
        return
    console.print(f"{temp}°F")


@app.command("cook-time")
def cook_time(
    steps: List[str] = typer.Argument(..., help="Instruction steps, in order"),
) -> None:
    """Extract total cooking time (minutes) from instruction steps."""
    from chefiq_analyzer.analysis import extract_cooking_time_from_instructions

    minutes = extract_cooking_time_from_instructions(steps)
    if minutes is None:
        console.print("[dim]No cooking time found.[/dim]")
        return
    console.print(f"{minutes} minutes")


@app.command()
def methods() -> None:
    """List the cooking methods the analyzer recognizes."""
    from chefiq_analyzer.core.patterns import COOKING_METHOD_PATTERNS
    from chefiq_analyzer.formatters import format_duration

    table = Table(title="ChefIQ Cooking Methods", show_header=True, header_style="bold")
    table.add_column("Method")
    table.add_column("ID")
    table.add_column("Appliance")
    table.add_column("Typical time")
    table.add_column("Keywords")

    for pattern in COOKING_METHOD_PATTERNS:
        table.add_row(
            pattern.method_name,
            pattern.method_id,
            pattern.appliance_type,
            format_duration((pattern.estimated_time_minutes or 0) * 60),
            ", ".join(pattern.keywords),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(COOKING_METHOD_PATTERNS)} methods[/dim]")


@app.command()
def health() -> None:
    """Check configuration and appliance catalog."""
    from chefiq_analyzer.config import get_settings
    from chefiq_analyzer.core.catalog import get_default_catalog
    from chefiq_analyzer.core.patterns import COOKING_METHOD_PATTERNS
    from chefiq_analyzer.exceptions import CatalogError

    console.print("\n[bold]ChefIQ Analyzer Health Check[/bold]\n")

    settings = get_settings()
    console.print("✅ Configuration loaded")
    console.print(f"   Environment: {settings.chefiq_env}")
    console.print(f"   Log level: {settings.log_level}")

    try:
        catalog = get_default_catalog()
    except CatalogError as e:
        console.print(f"\n[red]❌ Appliance catalog error: {e}[/red]")
        raise typer.Exit(1)

    source = settings.appliance_catalog_path or "built-in"
    console.print(f"✅ Appliance catalog: {len(catalog)} appliances ({source})")

    missing = sorted({p.appliance_type for p in COOKING_METHOD_PATTERNS} - {a.thing_category_name for a in catalog})
    if missing:
        console.print(f"⚠️  No appliance for method types: {', '.join(missing)}")
    else:
        console.print("✅ Every cooking method maps to an appliance")

    if settings.log_reasoning:
        console.print("ℹ️  Reasoning logging enabled")

    console.print("\n[green]All checks passed![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from chefiq_analyzer import __version__

    console.print(f"ChefIQ Analyzer version {__version__}")


if __name__ == "__main__":
    app()
