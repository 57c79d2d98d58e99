"""
Build command: token exports -> variables, utilities and styleguide files.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tokensmith.cli.utils import client_name, configure_logging, parse_client_option
from tokensmith.core.errors import ManifestError
from tokensmith.core.ir import ClientBuildResult
from tokensmith.core.manifest import (
    DEFAULT_INTERMEDIATE_DIR,
    MANIFEST_FILE,
    ProjectManifest,
    default_output_dir,
    load_manifest,
)
from tokensmith.core.pipeline import PipelineConfig, TokenPipeline

console = Console()


def _load_manifest(manifest: Path | None, has_sources: bool) -> ProjectManifest | None:
    """Explicit manifest, or ./tokensmith.toml when no sources were given."""
    if manifest is None:
        candidate = Path.cwd() / MANIFEST_FILE
        if has_sources or not candidate.exists():
            return None
        manifest = candidate
    try:
        return load_manifest(manifest)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _print_summary(results: list[ClientBuildResult], title: str) -> None:
    table = Table(title=title)
    table.add_column("Client", style="cyan")
    table.add_column("Status")
    table.add_column("Tokens", justify="right")
    table.add_column("Details")
    for result in results:
        if result.success:
            details = ", ".join(path.name for path in result.artifacts)
            table.add_row(result.client, "[green]ok[/green]", str(result.token_count), details)
        else:
            table.add_row(result.client, "[red]failed[/red]", "-", result.error or "")
    console.print(table)


def build_command(
    sources: list[Path] = typer.Argument(
        None, help="Figma export files; client name is the file stem without 'figma-'"
    ),
    client: list[str] = typer.Option(
        None, "--client", "-c", help="Client export as NAME=PATH (repeatable)"
    ),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", help=f"Project manifest (default: ./{MANIFEST_FILE})"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for generated CSS"
    ),
    intermediate_dir: Path | None = typer.Option(
        None, "--intermediate-dir", help="Directory for normalized token JSON"
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-j", min=1, help="Clients built in parallel"
    ),
    no_report: bool = typer.Option(False, "--no-report", help="Skip styleguide-<client>.json"),
    lenient_references: bool = typer.Option(
        False, "--lenient-references", help="Warn on unknown references instead of failing"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
) -> None:
    """
    Build CSS variables and colour utilities for one or more clients.

    Every client is attempted; the exit code is 1 if any of them failed.
    """
    configure_logging(verbose)

    targets: dict[str, Path] = {}
    project = _load_manifest(manifest, bool(sources or client))
    if project is not None:
        targets.update(project.clients)
    for source in sources or []:
        targets[client_name(source)] = source
    for value in client or []:
        name, path = parse_client_option(value)
        targets[name] = path

    if not targets:
        typer.echo("Error: no token exports given (pass files, --client or a manifest)", err=True)
        raise typer.Exit(code=1)

    overrides = {
        "output_dir": output_dir,
        "intermediate_dir": intermediate_dir,
        "workers": workers,
        "styleguide_report": False if no_report else None,
        "strict_references": False if lenient_references else None,
    }
    if project is not None:
        config = PipelineConfig.from_manifest(project, **overrides)
    else:
        config = PipelineConfig(
            output_dir=output_dir or default_output_dir(),
            intermediate_dir=intermediate_dir or Path(DEFAULT_INTERMEDIATE_DIR),
            workers=workers or 1,
            styleguide_report=not no_report,
            strict_references=not lenient_references,
        )

    results = TokenPipeline(config).build_all(targets)
    _print_summary(results, f"{project.name}: token build" if project else "Token build")

    failed = [r.client for r in results if not r.success]
    if failed:
        typer.echo(f"Build failed for: {', '.join(failed)}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Built {len(results)} client(s) into {config.output_dir}")
