"""
tokensmith CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from tokensmith._version import get_version

CLIENT_PREFIX = "figma-"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokensmith {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def client_name(source: Path) -> str:
    """
    Client name for an export file: its stem without a leading ``figma-``.

    Examples:
        >>> client_name(Path("tokens/figma-acme.json"))
        'acme'
    """
    return source.stem.removeprefix(CLIENT_PREFIX)


def parse_client_option(value: str) -> tuple[str, Path]:
    """
    Parse a ``NAME=PATH`` client option.

    Raises:
        typer.BadParameter: If the value is not of that form.
    """
    name, sep, path = value.partition("=")
    if not sep or not name.strip() or not path.strip():
        raise typer.BadParameter(f"Expected NAME=PATH, got {value!r}", param_hint="--client")
    return name.strip(), Path(path.strip())
