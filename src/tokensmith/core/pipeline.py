"""
Per-client token build pipeline.

A ``PipelineConfig`` is built once per run and wires the components
together; nothing is registered globally. ``TokenPipeline`` then runs each
client independently::

    export JSON -> normalize -> flatten -> resolve references
        -> normalize colours -> variables CSS + utilities CSS
        (+ intermediate tree JSON, + styleguide report JSON)

Clients share no mutable state. A failing client is logged and reported in
its ``ClientBuildResult``; the remaining clients still build.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .colors import normalize_colors
from .errors import InputError, TokenContext, TokensmithError
from .formatter import TokenFormatter
from .ir import DEFAULT_NAMESPACES, ClientBuildResult, Namespace, Token, TokenGroup
from .manifest import ProjectManifest, default_output_dir
from .normalizer import DEFAULT_CATCH_ALL, flatten, normalize, tree_to_dict
from .references import resolve_references
from .serializer import CssVariablesSerializer
from .styleguide import build_styleguide_report
from .units import UNIT_RULES, UnitRule
from .utilities import UtilityEmitter

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Everything one build run needs, composed explicitly."""

    output_dir: Path = field(default_factory=default_output_dir)
    intermediate_dir: Path | None = None
    unit_rules: tuple[UnitRule, ...] = UNIT_RULES
    namespaces: tuple[Namespace, ...] = DEFAULT_NAMESPACES
    catch_all: str = DEFAULT_CATCH_ALL
    strict_references: bool = True
    styleguide_report: bool = True
    workers: int = 1
    formatter: TokenFormatter = field(default_factory=TokenFormatter)
    serializer: CssVariablesSerializer | None = None
    utilities: UtilityEmitter = field(default_factory=UtilityEmitter)

    def __post_init__(self) -> None:
        if self.serializer is None:
            self.serializer = CssVariablesSerializer(self.formatter, self.namespaces)

    @classmethod
    def from_manifest(cls, manifest: ProjectManifest, **overrides: Any) -> PipelineConfig:
        """Config from a manifest; keyword overrides that are not None win."""
        build = manifest.build
        values: dict[str, Any] = {
            "output_dir": build.output_dir,
            "intermediate_dir": build.intermediate_dir,
            "catch_all": build.catch_all,
            "strict_references": build.strict_references,
            "styleguide_report": build.styleguide_report,
            "workers": build.workers,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class TokenPipeline:
    """Builds the stylesheets of one or more clients."""

    def __init__(self, config: PipelineConfig | None = None):
        self.config = config or PipelineConfig()

    # -- stages ---------------------------------------------------------------

    def load_export(self, client: str, source: Path) -> dict[str, Any]:
        """
        Read a client's export.

        Raises:
            InputError: Missing, unreadable or malformed JSON.
        """
        context = TokenContext(client=client)

        def reject_constant(name: str) -> Any:
            raise InputError(f"Invalid JSON in {source}: {name} is not a JSON number", context)

        try:
            data = json.loads(source.read_text(encoding="utf-8"), parse_constant=reject_constant)
        except FileNotFoundError:
            raise InputError(f"Token export not found: {source}", context) from None
        except json.JSONDecodeError as e:
            raise InputError(f"Invalid JSON in {source}: {e}", context) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read {source}: {e}", context) from e
        if not isinstance(data, dict):
            raise InputError(f"Expected a JSON object in {source}", context)
        return data

    def transform(self, raw: Mapping[str, Any], client: str) -> tuple[TokenGroup, list[Token]]:
        """Normalized tree plus the resolved flat token list."""
        tree = normalize(raw, self.config.unit_rules, self.config.catch_all)
        tokens = resolve_references(
            flatten(tree),
            strict=self.config.strict_references,
            catch_all=self.config.catch_all,
            client=client,
        )
        return tree, normalize_colors(tokens)

    def render(self, tokens: list[Token]) -> tuple[str, str]:
        """Variables and utilities stylesheet text."""
        serializer = self.config.serializer or CssVariablesSerializer(
            self.config.formatter, self.config.namespaces
        )
        return serializer.serialize(tokens), self.config.utilities.emit(tokens)

    # -- runs -----------------------------------------------------------------

    def build_client(self, client: str, source: Path) -> ClientBuildResult:
        """
        Build one client and write its artifacts.

        Raises:
            TokensmithError: On invalid input or references.
            OSError: If an artifact cannot be written.
        """
        logger.info("Building tokens for %s from %s", client, source)
        raw = self.load_export(client, source)
        tree, tokens = self.transform(raw, client)
        variables, utilities = self.render(tokens)

        artifacts: list[Path] = []
        output_dir = self.config.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        if self.config.intermediate_dir is not None:
            self.config.intermediate_dir.mkdir(parents=True, exist_ok=True)
            tree_path = self.config.intermediate_dir / f"tokens-{client}.json"
            tree_path.write_text(
                json.dumps(tree_to_dict(tree), indent=2, ensure_ascii=False), encoding="utf-8"
            )
            artifacts.append(tree_path)

        variables_path = output_dir / f"variables-{client}.css"
        variables_path.write_text(variables, encoding="utf-8")
        artifacts.append(variables_path)

        utilities_path = output_dir / f"utilities-{client}.css"
        utilities_path.write_text(utilities, encoding="utf-8")
        artifacts.append(utilities_path)

        if self.config.styleguide_report:
            report = build_styleguide_report(variables, client=client)
            report_path = output_dir / f"styleguide-{client}.json"
            report_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
            artifacts.append(report_path)

        logger.info("Built %d tokens for %s", len(tokens), client)
        return ClientBuildResult(
            client=client, success=True, token_count=len(tokens), artifacts=artifacts
        )

    def run_client(self, client: str, source: Path) -> ClientBuildResult:
        """Like :meth:`build_client`, but failures become a failed result."""
        try:
            return self.build_client(client, source)
        except (TokensmithError, OSError) as e:
            logger.error("Error building %s: %s", client, e)
            return ClientBuildResult(client=client, success=False, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error building %s", client)
            return ClientBuildResult(client=client, success=False, error=f"{type(e).__name__}: {e}")

    def build_all(self, sources: Mapping[str, Path]) -> list[ClientBuildResult]:
        """Build every client; results are in the order of ``sources``."""
        if self.config.workers <= 1 or len(sources) <= 1:
            return [self.run_client(client, source) for client, source in sources.items()]

        results: dict[str, ClientBuildResult] = {}
        max_workers = min(self.config.workers, len(sources))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(self.run_client, client, source): client
                for client, source in sources.items()
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return [results[client] for client in sources]

