"""Pattern and expression node definitions — all frozen (immutable) dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

WILDCARD_SIGIL = "?"
ZERO_OR_MORE_SUFFIX = "..."

L = TypeVar("L")


# ---------------------------------------------------------------------------
# Wildcards
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WildcardName:
    """A wildcard name like ?x or ?xs... (the suffix is kept)."""
    name: str

    def __post_init__(self):
        if not self.name.startswith(WILDCARD_SIGIL):
            raise ValueError(f"Wildcard name must start with {WILDCARD_SIGIL!r}: {self.name!r}")

    @classmethod
    def parse(cls, s: str) -> WildcardName:
        """Checked constructor; raises ValueError for non-wildcard strings."""
        return cls(s)

    @staticmethod
    def is_valid(s: str) -> bool:
        return s.startswith(WILDCARD_SIGIL)

    def __str__(self) -> str:
        return self.name


class WildcardKind(Enum):
    """How many sibling sub-terms a wildcard stands for."""
    SINGLE = "single"
    ZERO_OR_MORE = "zero_or_more"

    @classmethod
    def for_name(cls, name: str | WildcardName) -> WildcardKind:
        if str(name).endswith(ZERO_OR_MORE_SUFFIX):
            return cls.ZERO_OR_MORE
        return cls.SINGLE


@dataclass(frozen=True)
class Wildcard:
    """A named placeholder: Wildcard("?x") or Wildcard("?xs...")."""
    name: WildcardName
    kind: WildcardKind | None = None

    def __post_init__(self):
        if isinstance(self.name, str):
            object.__setattr__(self, "name", WildcardName(self.name))
        expected = WildcardKind.for_name(self.name)
        if self.kind is None:
            object.__setattr__(self, "kind", expected)
        elif self.kind is not expected:
            raise ValueError(f"{self.name} is a {expected.value} wildcard, not {self.kind.value}")

    def size(self) -> int:
        return 1

    def depth(self) -> int:
        return 1

    def to_ground(self) -> ConcreteExpr:
        from .ground import to_ground
        return to_ground(self)

    def to_dict(self) -> dict:
        return {"wildcard": self.name.name, "kind": self.kind.value}

    def __str__(self) -> str:
        return self.name.name


# ---------------------------------------------------------------------------
# Structural nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ENode(Generic[L]):
    """An operator with ordered pattern children; no children means a leaf."""
    op: L
    children: tuple[Pattern, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def leaf(cls, op: L) -> ENode[L]:
        return cls(op, ())

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def size(self) -> int:
        return 1 + sum(child.size() for child in self.children)

    def depth(self) -> int:
        return 1 + max((child.depth() for child in self.children), default=0)

    def to_ground(self) -> ConcreteExpr[L]:
        from .ground import to_ground
        return to_ground(self)

    def to_dict(self) -> dict:
        return {"op": self.op, "children": [child.to_dict() for child in self.children]}

    def __str__(self) -> str:
        from .printer import format_pattern
        return format_pattern(self)


Pattern = Union[ENode, Wildcard]


@dataclass(frozen=True)
class ConcreteExpr(Generic[L]):
    """A wildcard-free expression: an operator with concrete children."""
    op: L
    children: tuple[ConcreteExpr, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        for child in self.children:
            if not isinstance(child, ConcreteExpr):
                raise TypeError(f"ConcreteExpr child must be a ConcreteExpr, got {type(child).__name__}")

    @classmethod
    def leaf(cls, op: L) -> ConcreteExpr[L]:
        return cls(op, ())

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def size(self) -> int:
        return 1 + sum(child.size() for child in self.children)

    def depth(self) -> int:
        return 1 + max((child.depth() for child in self.children), default=0)

    def to_pattern(self) -> ENode[L]:
        """Every concrete expression is also a pattern."""
        return ENode(self.op, tuple(child.to_pattern() for child in self.children))

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "children": [child.to_dict() for child in self.children]}

    def __str__(self) -> str:
        from .printer import format_expr
        return format_expr(self)
