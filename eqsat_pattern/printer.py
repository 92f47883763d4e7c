"""Printer: Pattern / ConcreteExpr -> canonical S-expression text.

Output reads back through `parse_pattern` / `parse_expr` to the same tree,
given the same language. Operator tokens that cannot read back as an
operator (empty, containing whitespace, or starting with the wildcard
sigil) raise ValueError instead of printing.
"""

from __future__ import annotations

import re

from .language import DEFAULT_LANGUAGE, Language
from .pattern_nodes import WILDCARD_SIGIL, ConcreteExpr, Pattern, Wildcard

_BARE_TOKEN = re.compile(r'^[^\s()";]+$')


def format_pattern(pattern: Pattern, language: Language | None = None) -> str:
    """Render a pattern as `(op child ...)`, leaves as bare tokens."""
    language = language or DEFAULT_LANGUAGE
    if isinstance(pattern, Wildcard):
        return pattern.name.name
    return _render(language.format_op(pattern.op), [format_pattern(c, language) for c in pattern.children])


def format_expr(expr: ConcreteExpr, language: Language | None = None) -> str:
    """Render a concrete expression; same layout as format_pattern."""
    language = language or DEFAULT_LANGUAGE
    return _render(language.format_op(expr.op), [format_expr(c, language) for c in expr.children])


def _render(op_token: str, children: list[str]) -> str:
    head = quote_token(check_op_token(op_token))
    if not children:
        return head
    return "(" + " ".join([head, *children]) + ")"


def check_op_token(token: str) -> str:
    """Return token, or raise ValueError if it would not read back as an operator."""
    if not token or any(ch.isspace() for ch in token):
        raise ValueError(f"Operator {token!r} cannot be printed: it would read back as a malformed atom")
    if token.startswith(WILDCARD_SIGIL):
        raise ValueError(f"Operator {token!r} cannot be printed: it would read back as a wildcard")
    return token


def quote_token(token: str) -> str:
    """Quote token unless it reads back as a single bare atom."""
    if _BARE_TOKEN.match(token):
        return token
    escaped = token.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
