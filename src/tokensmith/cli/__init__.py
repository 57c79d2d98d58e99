"""
tokensmith CLI package.

- build.py: token build command
- styleguide.py: contrast and styleguide report commands
- utils.py: shared utilities
"""

from __future__ import annotations

import sys

import typer

from tokensmith.cli.build import build_command
from tokensmith.cli.styleguide import contrast_command, styleguide_command
from tokensmith.cli.utils import version_callback

app = typer.Typer(
    help="""tokensmith – design tokens to CSS

Commands:
  • build: Figma exports -> variables, utilities and styleguide files
  • contrast: readable colour pairs of a generated stylesheet
  • styleguide: styleguide data of a generated stylesheet as JSON
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """tokensmith main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="contrast")(contrast_command)
app.command(name="styleguide")(styleguide_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]

if __name__ == "__main__":
    main(sys.argv[1:])
