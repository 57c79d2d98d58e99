"""
Alias references between tokens.

Figma exports reference other variables as ``{namespace.path.to.token}``.
In CSS such a token becomes a ``var()`` pointing at the referenced custom
property, so the cascade keeps the relationship. For the intermediate data
the reference is also resolved to the literal it points at, keeping the
authored alias in ``Token.original_value``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from .errors import make_alias_error
from .ir import Token
from .numbers import js_string

logger = logging.getLogger(__name__)

ALIAS_RE = re.compile(r"\{([^}]+)\}")

# Stripped from references, first occurrence only, in this order
ALIAS_PREFIXES: tuple[str, ...] = ("primitives.", "typography.", "blocks.", "color.")


def is_alias(value: Any) -> bool:
    """True if ``value`` is a string using reference syntax."""
    return isinstance(value, str) and "{" in value


def contains_alias(value: Any) -> bool:
    """True for an alias string, or a list holding one at any depth."""
    if isinstance(value, list | tuple):
        return any(contains_alias(item) for item in value)
    return is_alias(value)


def alias_references(value: str, path: Iterable[str] = ()) -> list[str]:
    """
    Return every reference in ``value``, in order.

    Raises:
        AliasError: If the braces in ``value`` are malformed.
    """
    refs = ALIAS_RE.findall(value)
    leftover = ALIAS_RE.sub("", value)
    if not refs or "{" in leftover or "}" in leftover or any("{" in ref for ref in refs):
        raise make_alias_error(f"Malformed reference {value!r}", tuple(path))
    return [ref.strip() for ref in refs]


def find_alias(value: str, path: Iterable[str] = ()) -> str:
    """Return the first reference in ``value``."""
    return alias_references(value, path)[0]


def clean_reference(ref: str) -> str:
    """
    Turn a dotted reference into a custom property name.

    Examples:
        >>> clean_reference("primitives.color.brand.500")
        '--brand--500'
    """
    for prefix in ALIAS_PREFIXES:
        ref = ref.replace(prefix, "", 1)
    return "--" + "--".join(ref.split("."))


def alias_to_css_var(ref: str) -> str:
    return f"var({clean_reference(ref)})"


class _Resolver:
    """Resolves references over one client's flat token list."""

    def __init__(self, tokens: list[Token], strict: bool, catch_all: str, client: str | None):
        self.index = {token.dotted_path: token for token in tokens}
        self.strict = strict
        self.catch_all = catch_all
        self.client = client
        self.cache: dict[str, Any] = {}

    def lookup(self, ref: str) -> Token | None:
        target = self.index.get(ref)
        prefix = f"{self.catch_all}."
        if target is None and ref.startswith(prefix):
            target = self.index.get(ref[len(prefix) :])
        return target

    def _missing(self, ref: str, token: Token) -> None:
        if self.strict:
            raise make_alias_error(f"Reference {{{ref}}} not found", token.path, self.client)
        logger.warning("%s: reference {%s} not found, keeping alias", token.dotted_path, ref)

    def resolve(self, token: Token, stack: tuple[str, ...] = ()) -> Any:
        key = token.dotted_path
        if key in self.cache:
            return self.cache[key]
        if key in stack:
            cycle = " -> ".join((*stack, key))
            raise make_alias_error(f"Circular reference: {cycle}", token.path, self.client)

        raw = token.raw_value
        if not contains_alias(raw):
            return raw

        result = self._resolve_value(raw, token, (*stack, key))
        self.cache[key] = result
        return result

    def _resolve_value(self, raw: Any, token: Token, chain: tuple[str, ...]) -> Any:
        if isinstance(raw, list | tuple):
            return [self._resolve_value(item, token, chain) for item in raw]
        if not is_alias(raw):
            return raw

        refs = alias_references(raw, token.path)
        if raw.strip() == f"{{{refs[0]}}}":
            target = self.lookup(refs[0])
            if target is None:
                self._missing(refs[0], token)
                return raw
            return self.resolve(target, chain)

        def substitute(match: re.Match[str]) -> str:
            ref = match.group(1).strip()
            target = self.lookup(ref)
            if target is None:
                self._missing(ref, token)
                return match.group(0)
            return js_string(self.resolve(target, chain))

        return ALIAS_RE.sub(substitute, raw)


def resolve_references(
    tokens: list[Token],
    strict: bool = True,
    catch_all: str = "tokens",
    client: str | None = None,
) -> list[Token]:
    """
    Resolve alias values to literals.

    Aliased tokens get ``value`` set to the resolved literal and
    ``original_value`` set to the authored alias; other tokens are
    returned unchanged. A token keeps its own declared ``type``; a value
    that is exactly one reference takes the target's resolved value as is
    (a number stays a number). Aliases inside list values are resolved
    item by item.

    Args:
        tokens: Flat token list of one client
        strict: Raise on references to unknown tokens instead of warning
        catch_all: Export entry name that may prefix references
        client: Client name for error messages

    Raises:
        AliasError: Malformed, circular or (in strict mode) dangling reference
    """
    resolver = _Resolver(tokens, strict, catch_all, client)
    resolved: list[Token] = []
    for token in tokens:
        raw = token.raw_value
        if contains_alias(raw):
            token = token.model_copy(
                update={"value": resolver.resolve(token), "original_value": raw}
            )
        resolved.append(token)
    return resolved
