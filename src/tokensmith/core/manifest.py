"""
Project manifest (``tokensmith.toml``).

Example::

    [project]
    name = "Client styleguides"

    [build]
    output_dir = "build/css"
    intermediate_dir = "build/tokens"
    workers = 4
    strict_references = true
    styleguide_report = true
    catch_all = "tokens"

    [clients]
    acme = "tokens/figma-acme.json"
    globex = "tokens/figma-globex.json"

Relative paths are resolved against the manifest's directory.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ManifestError

MANIFEST_FILE = "tokensmith.toml"
DEFAULT_OUTPUT_DIR = "build/css"
DEFAULT_INTERMEDIATE_DIR = "build/tokens"
OUTPUT_DIR_ENV = "TOKENSMITH_OUTPUT_DIR"


def default_output_dir() -> Path:
    """Output directory when neither the manifest nor the CLI sets one."""
    return Path(os.environ.get(OUTPUT_DIR_ENV, DEFAULT_OUTPUT_DIR))


@dataclass
class BuildConfig:
    """[build] section."""

    output_dir: Path = field(default_factory=default_output_dir)
    intermediate_dir: Path | None = Path(DEFAULT_INTERMEDIATE_DIR)
    workers: int = 1
    strict_references: bool = True
    styleguide_report: bool = True
    catch_all: str = "tokens"


@dataclass
class ProjectManifest:
    name: str = "tokensmith"
    build: BuildConfig = field(default_factory=BuildConfig)
    clients: dict[str, Path] = field(default_factory=dict)
    root: Path = field(default_factory=Path.cwd)


def _expect(value: Any, kind: type | tuple[type, ...], key: str) -> Any:
    if not isinstance(value, kind) or isinstance(value, bool) and kind is int:
        raise ManifestError(f"{key} has the wrong type: {value!r}")
    return value


def _parse_build(data: dict[str, Any], root: Path) -> BuildConfig:
    config = BuildConfig()
    if "output_dir" in data:
        config.output_dir = root / _expect(data["output_dir"], str, "build.output_dir")
    else:
        config.output_dir = root / config.output_dir
    if "intermediate_dir" in data:
        value = _expect(data["intermediate_dir"], str, "build.intermediate_dir")
        config.intermediate_dir = root / value if value else None
    elif config.intermediate_dir is not None:
        config.intermediate_dir = root / config.intermediate_dir
    if "workers" in data:
        config.workers = _expect(data["workers"], int, "build.workers")
        if config.workers < 1:
            raise ManifestError(f"build.workers must be at least 1, got {config.workers}")
    if "strict_references" in data:
        config.strict_references = _expect(
            data["strict_references"], bool, "build.strict_references"
        )
    if "styleguide_report" in data:
        config.styleguide_report = _expect(
            data["styleguide_report"], bool, "build.styleguide_report"
        )
    if "catch_all" in data:
        config.catch_all = _expect(data["catch_all"], str, "build.catch_all")
    return config


def load_manifest(path: Path) -> ProjectManifest:
    """
    Read and validate a tokensmith.toml.

    Raises:
        ManifestError: If the file is missing, not TOML, or has invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}") from None
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    root = path.resolve().parent
    project = _expect(data.get("project", {}), dict, "project")
    build = _expect(data.get("build", {}), dict, "build")
    clients_data = _expect(data.get("clients", {}), dict, "clients")

    clients = {
        str(name): root / _expect(source, str, f"clients.{name}")
        for name, source in clients_data.items()
    }

    return ProjectManifest(
        name=_expect(project.get("name", "tokensmith"), str, "project.name"),
        build=_parse_build(build, root),
        clients=clients,
        root=root,
    )
