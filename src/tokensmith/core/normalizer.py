"""
Token tree normalization.

Turns a raw Figma variables export into a typed, unit-annotated
``TokenGroup``:

1. Composite text styles (nodes with ``fontSize``/``fontFamily``) are
   removed from the typography branch; they cannot be expressed as a
   single custom property.
2. Every node is classified once as a group or a token leaf.
3. Leaves get unit metadata from the ordered unit rule table.

The raw import is never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .errors import InputError
from .ir import Token, TokenGroup, TokenLeaf
from .units import UNIT_RULES, UnitRule, classify_unit

logger = logging.getLogger(__name__)

TOP_LEVEL_NAMESPACES: tuple[str, ...] = ("primitives", "typography", "blocks")
DEFAULT_CATCH_ALL = "tokens"

# Raw leaf fields that map onto Token fields rather than attributes
_TOKEN_FIELDS = ("type", "value", "unit")


def is_token_node(node: Any) -> bool:
    """A raw node is a token iff it has a truthy ``type`` and a ``value`` key."""
    return isinstance(node, Mapping) and bool(node.get("type")) and "value" in node


def is_text_style(node: Any) -> bool:
    """Composite Figma text style (font size/family bundle)."""
    return isinstance(node, Mapping) and (
        node.get("fontSize") is not None or node.get("fontFamily") is not None
    )


def filter_text_styles(raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Rebuild ``raw`` without any text-style node, at any depth.

    Token leaves and scalars are kept verbatim; every other mapping is
    filtered recursively.
    """
    filtered: dict[str, Any] = {}
    for key, child in raw.items():
        if is_text_style(child):
            logger.debug("Dropping text style %r", key)
            continue
        if isinstance(child, Mapping) and not is_token_node(child):
            filtered[key] = filter_text_styles(child)
        else:
            filtered[key] = child
    return filtered


def _make_token(node: Mapping[str, Any], path: tuple[str, ...]) -> Token:
    return Token(
        path=path,
        type=str(node["type"]),
        value=node["value"],
        unit=node.get("unit"),
        attributes={k: v for k, v in node.items() if k not in _TOKEN_FIELDS},
    )


def build_tree(raw: Mapping[str, Any], path: tuple[str, ...] = ()) -> TokenGroup:
    """
    Classify a raw mapping into a typed tree.

    Mappings that are not tokens become groups, including nodes that have a
    ``type`` but no ``value``. Scalars and lists in group position are not
    tokens and are skipped.
    """
    children: dict[str, TokenGroup | TokenLeaf] = {}
    for key, child in raw.items():
        child_path = (*path, key)
        if is_token_node(child):
            children[key] = TokenLeaf(token=_make_token(child, child_path))
        elif isinstance(child, Mapping):
            children[key] = build_tree(child, child_path)
        else:
            logger.debug("Skipping non-token value at %s", ".".join(child_path))
    return TokenGroup(children=children)


def add_unit_metadata(
    tree: TokenGroup, rules: tuple[UnitRule, ...] = UNIT_RULES
) -> TokenGroup:
    """
    Return a copy of ``tree`` with unit metadata on every matching leaf.

    The unit depends only on the leaf's immediate key; leaves without a
    matching rule keep their current unit. Running this twice is a no-op.
    """
    children: dict[str, TokenGroup | TokenLeaf] = {}
    for key, node in tree.children.items():
        if isinstance(node, TokenLeaf):
            unit = classify_unit(key, rules)
            if unit is not None and unit != node.token.unit:
                node = TokenLeaf(token=node.token.model_copy(update={"unit": unit}))
            children[key] = node
        else:
            children[key] = add_unit_metadata(node, rules)
    return TokenGroup(children=children)


def _namespace(raw_import: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw_import.get(key) or {}
    if not isinstance(value, Mapping):
        raise InputError(f"{key!r} must be an object, got {type(value).__name__}")
    return value


def _remainder(raw_import: Mapping[str, Any], catch_all: str) -> dict[str, Any]:
    """Collect catch-all children and unknown top-level entries."""
    reserved = set(TOP_LEVEL_NAMESPACES)
    merged: dict[str, Any] = {}

    sources: list[Mapping[str, Any]] = []
    nested = raw_import.get(catch_all)
    if isinstance(nested, Mapping):
        sources.append(nested)
    sources.append(
        {k: v for k, v in raw_import.items() if k not in reserved and k != catch_all}
    )

    for source in sources:
        for key, value in source.items():
            if key in reserved:
                logger.warning("Ignoring %r: name is reserved for a top-level namespace", key)
                continue
            if key in merged:
                logger.warning("Top-level group %r defined twice; keeping the last one", key)
            merged[key] = value
    return merged


def normalize(
    raw_import: Mapping[str, Any],
    rules: tuple[UnitRule, ...] = UNIT_RULES,
    catch_all: str = DEFAULT_CATCH_ALL,
) -> TokenGroup:
    """
    Normalize a raw export into an annotated token tree.

    The result always has ``primitives``, ``typography`` and ``blocks`` at
    the top (possibly empty), followed by the catch-all remainder: the
    children of the export's ``catch_all`` entry plus any other top-level
    entries, merged as additional top-level groups.

    Args:
        raw_import: Parsed JSON export
        rules: Ordered unit rule table
        catch_all: Name of the export entry holding semantic/utility tokens

    Returns:
        A fully materialized, independent tree
    """
    raw_tree: dict[str, Any] = {
        "primitives": _namespace(raw_import, "primitives"),
        "typography": filter_text_styles(_namespace(raw_import, "typography")),
        "blocks": _namespace(raw_import, "blocks"),
    }
    raw_tree.update(_remainder(raw_import, catch_all))
    return add_unit_metadata(build_tree(raw_tree), rules)


def tree_to_dict(tree: TokenGroup) -> dict[str, Any]:
    """Serialize a tree back to plain JSON-compatible data."""
    data: dict[str, Any] = {}
    for key, node in tree.children.items():
        if isinstance(node, TokenLeaf):
            token = node.token
            leaf: dict[str, Any] = {"type": token.type, "value": token.raw_value}
            leaf.update(token.attributes)
            if token.unit is not None:
                leaf["unit"] = token.unit
            data[key] = leaf
        else:
            data[key] = tree_to_dict(node)
    return data


def iter_tokens(tree: TokenGroup) -> Iterator[Token]:
    """Yield tokens depth-first in declaration order."""
    for node in tree.children.values():
        if isinstance(node, TokenLeaf):
            yield node.token
        else:
            yield from iter_tokens(node)


def flatten(tree: TokenGroup) -> list[Token]:
    return list(iter_tokens(tree))
