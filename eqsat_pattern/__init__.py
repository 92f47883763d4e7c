"""eqsat-pattern — S-expression patterns for term rewriting and equality saturation."""

from .errors import (
    EmptyListError,
    EmptyTermError,
    InvalidAtomError,
    InvalidOperatorError,
    LexicalError,
    MalformedAtomError,
    ParseError,
    PatternError,
    WildcardInGroundTermError,
)
from .ground import is_ground, iter_wildcards, to_ground, wildcard_names
from .language import (
    ArithmeticLanguage,
    CallableLanguage,
    Language,
    SymbolLanguage,
    VocabularyLanguage,
    get_language,
    list_languages,
    register_language,
    reset_languages,
    unregister_language,
)
from .parser import build_term, classify_atom, parse_expr, parse_pattern
from .pattern_nodes import (
    ConcreteExpr,
    ENode,
    Pattern,
    Wildcard,
    WildcardKind,
    WildcardName,
)
from .printer import format_expr, format_pattern
from .sexp import Atom, Empty, SexpList, read_sexp

__version__ = "0.1.0"

__all__ = [
    "parse_pattern",
    "parse_expr",
    "build_term",
    "classify_atom",
    "to_ground",
    "iter_wildcards",
    "wildcard_names",
    "is_ground",
    "format_pattern",
    "format_expr",
    "read_sexp",
    "Atom",
    "SexpList",
    "Empty",
    "ENode",
    "Wildcard",
    "WildcardName",
    "WildcardKind",
    "Pattern",
    "ConcreteExpr",
    "Language",
    "SymbolLanguage",
    "VocabularyLanguage",
    "ArithmeticLanguage",
    "CallableLanguage",
    "register_language",
    "unregister_language",
    "get_language",
    "list_languages",
    "reset_languages",
    "PatternError",
    "ParseError",
    "LexicalError",
    "EmptyTermError",
    "EmptyListError",
    "InvalidOperatorError",
    "InvalidAtomError",
    "MalformedAtomError",
    "WildcardInGroundTermError",
]
