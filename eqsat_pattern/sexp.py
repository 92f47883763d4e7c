"""Lark-based S-expression reader — turns text into a generic tree.

The reader knows nothing about wildcards or operators: it produces
`Atom`, `SexpList` and `Empty` nodes, and leaves their interpretation to
`eqsat_pattern.parser`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from .errors import LexicalError


# ---------------------------------------------------------------------------
# Generic tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Atom:
    """A bare or quoted token."""
    value: str
    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SexpList:
    """A parenthesized sequence of terms."""
    items: tuple[Sexp, ...]
    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class Empty:
    """What the reader returns when the text holds no term at all."""

    def __str__(self) -> str:
        return ""


EMPTY = Empty()

Sexp = Union[Atom, SexpList, Empty]


# ---------------------------------------------------------------------------
# Grammar loading (cached)
# ---------------------------------------------------------------------------

_GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"
_lark_parser: Lark | None = None
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)


def _get_parser() -> Lark:
    global _lark_parser
    if _lark_parser is None:
        grammar_text = _GRAMMAR_PATH.read_text(encoding="utf-8")
        # LALR with the contextual lexer: Earley's dynamic lexer would be
        # free to split a symbol like `abc` into several atoms.
        _lark_parser = Lark(
            grammar_text,
            parser="lalr",
            propagate_positions=True,
        )
    return _lark_parser


# ---------------------------------------------------------------------------
# Transformer: Lark parse tree -> generic tree
# ---------------------------------------------------------------------------

class SexpTransformer(Transformer):
    """Converts the Lark parse tree into Atom / SexpList / Empty nodes."""

    def start(self, items):
        return items[0] if items else EMPTY

    @v_args(meta=True)
    def sexp_list(self, meta, items):
        return SexpList(
            items=tuple(items),
            line=getattr(meta, "line", None),
            column=getattr(meta, "column", None),
        )

    def atom(self, items):
        tok = items[0]
        value = _unquote(tok) if tok.type == "STRING" else str(tok)
        return Atom(value=value, line=tok.line, column=tok.column)


def _unquote(token: Token) -> str:
    """Remove surrounding quotes from a STRING token."""
    s = str(token)
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        return _ESCAPE.sub(r"\1", s[1:-1])
    return s


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_sexp(text: str) -> Sexp:
    """Read one S-expression from text.

    Raises LexicalError on unbalanced brackets, stray tokens, trailing
    input after the first term, or nesting deeper than the interpreter's
    recursion limit allows.
    """
    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 1:
            line = column = None
        raise LexicalError(message=str(e).strip(), line=line, column=column) from e
    try:
        return SexpTransformer().transform(tree)
    except VisitError as e:
        if not isinstance(e.orig_exc, RecursionError):
            raise
        raise LexicalError("expression nested too deeply") from e
    except RecursionError as e:
        raise LexicalError("expression nested too deeply") from e
