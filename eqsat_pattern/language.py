"""Operator languages: how a token becomes an operator value.

A `Language` turns one atom token into an operator (or leaf value) of
some domain, or raises `ValueError` when the token does not belong to it.
Named languages live in a small registry so the CLI can pick one by name.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable


class Language:
    """Base class for operator languages."""

    name = "language"

    def parse_op(self, token: str) -> Any:
        """Return the operator for token, or raise ValueError."""
        raise NotImplementedError

    def format_op(self, op: Any) -> str:
        """Return the token that parses back to op."""
        return str(op)

    def is_op(self, token: str) -> bool:
        try:
            self.parse_op(token)
        except ValueError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SymbolLanguage(Language):
    """Every token is an operator; the operator is the token itself."""

    name = "symbols"

    def parse_op(self, token: str) -> str:
        return token


class VocabularyLanguage(Language):
    """A closed set of operator names."""

    def __init__(self, symbols: Iterable[str], name: str = "vocabulary"):
        self.symbols = frozenset(symbols)
        self.name = name

    def parse_op(self, token: str) -> str:
        if token not in self.symbols:
            raise ValueError(f"{token!r} is not in the {self.name} vocabulary")
        return token


_INT_RE = re.compile(r"^[+-]?\d+$")
_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_']*$")


class ArithmeticLanguage(Language):
    """Integer constants, arithmetic operators and variable names."""

    name = "arith"
    OPERATORS = frozenset({"+", "-", "*", "/", "^", "neg", "sqrt"})

    def parse_op(self, token: str) -> int | str:
        if _INT_RE.match(token):
            return int(token)
        if token in self.OPERATORS or _IDENT_RE.match(token):
            return token
        raise ValueError(f"{token!r} is not an arithmetic symbol")


class CallableLanguage(Language):
    """Wraps a plain function such as int or a dict's __getitem__.

    ValueError, LookupError (KeyError, IndexError) or TypeError from the
    function marks a token invalid; it is re-raised as ValueError.
    """

    def __init__(
        self,
        parse_fn: Callable[[str], Any],
        name: str = "callable",
        format_fn: Callable[[Any], str] | None = None,
    ):
        self._parse_fn = parse_fn
        self._format_fn = format_fn
        self.name = name

    def parse_op(self, token: str) -> Any:
        try:
            return self._parse_fn(token)
        except (LookupError, TypeError) as e:
            raise ValueError(f"{token!r} is not a {self.name} operator") from e

    def format_op(self, op: Any) -> str:
        if self._format_fn is None:
            return str(op)
        return self._format_fn(op)


DEFAULT_LANGUAGE = SymbolLanguage()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def _builtin_languages() -> dict[str, Language]:
    return {"symbols": DEFAULT_LANGUAGE, "arith": ArithmeticLanguage()}


_LANGUAGES: dict[str, Language] = _builtin_languages()


def register_language(language: Language) -> None:
    """Register a language under its name.

    Raises:
        ValueError: If a language with the same name is already registered.
    """
    if language.name in _LANGUAGES:
        raise ValueError(f"Language '{language.name}' is already registered")
    _LANGUAGES[language.name] = language


def unregister_language(name: str) -> None:
    """Remove a registered language."""
    _LANGUAGES.pop(name, None)


def get_language(name: str) -> Language | None:
    """Get a registered language by name."""
    return _LANGUAGES.get(name)


def list_languages() -> list[Language]:
    """List all registered languages."""
    return sorted(_LANGUAGES.values(), key=lambda lang: lang.name)


def reset_languages() -> None:
    """Drop user registrations and restore the built-ins (useful for testing)."""
    _LANGUAGES.clear()
    _LANGUAGES.update(_builtin_languages())
