"""
Styleguide commands: contrast table and JSON report from a variables stylesheet.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tokensmith.cli.utils import configure_logging
from tokensmith.core.contrast import contrast_combinations
from tokensmith.core.ir import ContrastPair
from tokensmith.core.styleguide import build_styleguide_report, color_variables, read_root_variables

console = Console()


class Level(StrEnum):
    AA_LARGE = "aa-large"
    AA = "aa"
    AAA_LARGE = "aaa-large"
    AAA = "aaa"


def passes(pair: ContrastPair, level: Level) -> bool:
    """True if ``pair`` meets ``level``."""
    return {
        Level.AA_LARGE: pair.wcag.aa_large,
        Level.AA: pair.wcag.aa_all,
        Level.AAA_LARGE: pair.wcag.aaa_large,
        Level.AAA: pair.wcag.aaa_all,
    }[level]


def _read_css(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1) from e


def contrast_command(
    variables_css: Path = typer.Argument(..., help="Generated variables-<client>.css"),
    pattern: str = typer.Option("brand", "--pattern", "-p", help="Variable name filter"),
    level: Level = typer.Option(Level.AA_LARGE, "--level", "-l", help="Minimum WCAG level"),
) -> None:
    """Show readable colour combinations, highest contrast first."""
    configure_logging()
    colors = color_variables(read_root_variables(_read_css(variables_css)), pattern)
    pairs = [pair for pair in contrast_combinations(colors) if passes(pair, level)]

    if not pairs:
        console.print(f"[yellow]No combinations of '{pattern}' colours pass {level}[/yellow]")
        return

    table = Table(title=f"Contrast ({pattern}, {level})")
    table.add_column("Foreground", style="cyan")
    table.add_column("Background", style="cyan")
    table.add_column("Ratio", justify="right")
    table.add_column("WCAG")
    for pair in pairs:
        table.add_row(
            f"{pair.foreground.human_name} ({pair.foreground.value})",
            f"{pair.background.human_name} ({pair.background.value})",
            f"{pair.ratio:.2f}",
            pair.label,
        )
    console.print(table)


def styleguide_command(
    variables_css: Path = typer.Argument(..., help="Generated variables-<client>.css"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Swatches, typography specs and contrast pairs as JSON."""
    configure_logging()
    client = variables_css.stem.removeprefix("variables-")
    report = build_styleguide_report(_read_css(variables_css), client=client)
    data = report.model_dump_json(indent=2)
    if output is None:
        typer.echo(data)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(data, encoding="utf-8")
    typer.echo(f"Wrote {output}")
