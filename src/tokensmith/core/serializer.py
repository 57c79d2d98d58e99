"""
Variables stylesheet serialization.

Tokens are partitioned into namespace buckets by their first path segment,
grouped inside each bucket by category (first segment left after dropping
namespace segments) and written as one ``:root`` block::

    :root {
      /* ==================== */
      /* PRIMITIVES           */
      /* ==================== */

      /* brand */
      --brand--500: #2f305e;

    }
"""

from __future__ import annotations

from collections.abc import Sequence

from .formatter import TokenFormatter, nameable, strip_namespaces
from .ir import DEFAULT_NAMESPACES, Namespace, Token

BANNER_RULE = "=" * 20
FALLBACK_CATEGORY = "other"


def category_of(token: Token) -> str:
    """Group key of a token inside its bucket."""
    remaining = strip_namespaces(token.path)
    return remaining[0] if remaining else FALLBACK_CATEGORY


def partition(
    tokens: Sequence[Token], namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES
) -> list[tuple[Namespace, list[Token]]]:
    """
    Split tokens into namespace buckets, in namespace order.

    Membership is exact equality of ``path[0]`` with the namespace key; the
    catch-all namespace (key None) takes every token no keyed namespace
    claimed. Buckets keep the input order of their tokens.
    """
    keyed = {ns.key for ns in namespaces if ns.key is not None}
    buckets: list[tuple[Namespace, list[Token]]] = []
    for namespace in namespaces:
        if namespace.key is None:
            members = [t for t in tokens if not t.path or t.path[0] not in keyed]
        else:
            members = [t for t in tokens if t.path and t.path[0] == namespace.key]
        buckets.append((namespace, members))
    return buckets


def group_by_category(tokens: Sequence[Token]) -> dict[str, list[Token]]:
    """Group tokens by category, preserving first-seen order within groups."""
    groups: dict[str, list[Token]] = {}
    for token in tokens:
        groups.setdefault(category_of(token), []).append(token)
    return groups


def banner(title: str) -> list[str]:
    return [
        f"  /* {BANNER_RULE} */",
        f"  /* {title:<20} */",
        f"  /* {BANNER_RULE} */",
    ]


class CssVariablesSerializer:
    """Writes the sectioned ``:root`` stylesheet for one client."""

    def __init__(
        self,
        formatter: TokenFormatter | None = None,
        namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES,
    ):
        self.formatter = formatter or TokenFormatter()
        self.namespaces = tuple(namespaces)

    def serialize_bucket(self, namespace: Namespace, tokens: Sequence[Token]) -> list[str]:
        lines = banner(namespace.title)
        lines.append("")
        groups = group_by_category(tokens)
        for category in sorted(groups):
            lines.append(f"  /* {category} */")
            lines.extend(self.formatter.format_token(token) for token in groups[category])
            lines.append("")
        return lines

    def serialize(self, tokens: Sequence[Token]) -> str:
        lines = [":root {"]
        for namespace, members in partition(nameable(tokens), self.namespaces):
            lines.extend(self.serialize_bucket(namespace, members))
        lines.append("}")
        return "\n".join(lines) + "\n"


def serialize(
    tokens: Sequence[Token], namespace_order: Sequence[Namespace] = DEFAULT_NAMESPACES
) -> str:
    """Serialize tokens into the variables stylesheet text."""
    return CssVariablesSerializer(namespaces=namespace_order).serialize(tokens)
