"""Pattern parser — turns S-expression text into Pattern / ConcreteExpr trees."""

from __future__ import annotations

import logging

from .errors import (
    EmptyListError,
    EmptyTermError,
    InvalidAtomError,
    InvalidOperatorError,
    LexicalError,
    MalformedAtomError,
    ParseError,
)
from .ground import to_ground
from .language import DEFAULT_LANGUAGE, Language
from .pattern_nodes import ConcreteExpr, ENode, Pattern, Wildcard, WildcardKind, WildcardName
from .sexp import Atom, Empty, Sexp, SexpList, read_sexp

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Symbol classifier
# ---------------------------------------------------------------------------

def classify_atom(token: str, language: Language | None = None, line: int | None = None,
                  column: int | None = None) -> Pattern:
    """Classify one atom token as a Wildcard or a leaf ENode.

    Wildcard names win over operators, so `?x` is a wildcard even in a
    language that would accept it as a symbol.
    """
    language = language or DEFAULT_LANGUAGE
    _check_token(token, line, column)

    if WildcardName.is_valid(token):
        name = WildcardName.parse(token)
        return Wildcard(name, WildcardKind.for_name(name))

    try:
        op = language.parse_op(token)
    except ValueError as e:
        raise InvalidAtomError(token, line, column) from e
    return ENode.leaf(op)


def _check_token(token: str, line: int | None, column: int | None) -> None:
    if not token or any(ch.isspace() for ch in token):
        raise MalformedAtomError(token, line, column)


# ---------------------------------------------------------------------------
# Term builder
# ---------------------------------------------------------------------------

def build_term(sexp: Sexp, language: Language | None = None) -> Pattern:
    """Convert one reader node into a Pattern, recursively."""
    language = language or DEFAULT_LANGUAGE

    if isinstance(sexp, Atom):
        return classify_atom(sexp.value, language, sexp.line, sexp.column)

    if isinstance(sexp, SexpList):
        if not sexp.items:
            raise EmptyListError("empty list has no operator", sexp.line, sexp.column)
        head, rest = sexp.items[0], sexp.items[1:]
        op = _parse_operator(head, language)
        children = tuple(build_term(item, language) for item in rest)
        return ENode(op, children)

    if isinstance(sexp, Empty):
        raise EmptyTermError("empty term")

    raise TypeError(f"Not an S-expression node: {sexp!r}")


def _parse_operator(head: Sexp, language: Language):
    if not isinstance(head, Atom):
        line = getattr(head, "line", None)
        column = getattr(head, "column", None)
        raise InvalidOperatorError(f"expected op, got {head}", str(head), line, column)

    token = head.value
    _check_token(token, head.line, head.column)
    if WildcardName.is_valid(token):
        raise InvalidOperatorError(
            f"wildcard {token} cannot be used as an operator", token, head.line, head.column
        )
    try:
        return language.parse_op(token)
    except ValueError as e:
        raise InvalidOperatorError(f"bad op: {token}", token, head.line, head.column) from e


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_pattern(text: str, language: Language | None = None) -> Pattern:
    """Parse S-expression text into a Pattern.

    Raises a ParseError subclass (LexicalError, EmptyTermError,
    EmptyListError, InvalidOperatorError, InvalidAtomError or
    MalformedAtomError) when the text is not a valid pattern.
    Nesting too deep to walk is reported as a LexicalError.
    """
    language = language or DEFAULT_LANGUAGE
    logger.debug("parsing pattern %r with language %s", text, language.name)
    try:
        sexp = read_sexp(text.strip())
        try:
            return build_term(sexp, language)
        except RecursionError as e:
            raise LexicalError("expression nested too deeply") from e
    except ParseError as e:
        logger.debug("pattern parse failed: %s", e)
        raise


def parse_expr(text: str, language: Language | None = None) -> ConcreteExpr:
    """Parse S-expression text into a wildcard-free ConcreteExpr.

    Raises ParseError subclasses as parse_pattern does, and
    WildcardInGroundTermError if the text parses but contains a wildcard.
    """
    pattern = parse_pattern(text, language)
    try:
        return to_ground(pattern)
    except RecursionError as e:
        raise LexicalError("expression nested too deeply") from e
