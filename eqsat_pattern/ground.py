"""Pattern -> ConcreteExpr downgrade and wildcard queries."""

from __future__ import annotations

from typing import Iterator

from .errors import WildcardInGroundTermError
from .pattern_nodes import ConcreteExpr, Pattern, Wildcard


def to_ground(pattern: Pattern) -> ConcreteExpr:
    """Rebuild pattern as a ConcreteExpr.

    Children are converted left to right, so the wildcard reported is the
    first one in depth-first order.

    Raises WildcardInGroundTermError if any wildcard appears in the tree.
    """
    if isinstance(pattern, Wildcard):
        raise WildcardInGroundTermError(pattern)
    return ConcreteExpr(pattern.op, tuple(to_ground(child) for child in pattern.children))


def iter_wildcards(pattern: Pattern) -> Iterator[Wildcard]:
    """Yield every wildcard occurrence, depth-first and left to right."""
    if isinstance(pattern, Wildcard):
        yield pattern
        return
    for child in pattern.children:
        yield from iter_wildcards(child)


def wildcard_names(pattern: Pattern) -> list[str]:
    """Distinct wildcard names in order of first occurrence."""
    seen: dict[str, None] = {}
    for wildcard in iter_wildcards(pattern):
        seen.setdefault(wildcard.name.name, None)
    return list(seen)


def is_ground(pattern: Pattern) -> bool:
    """True if pattern contains no wildcard anywhere."""
    return next(iter_wildcards(pattern), None) is None
