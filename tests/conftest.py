"""Shared fixtures for eqsat-pattern tests."""

import pytest

from eqsat_pattern.language import (
    ArithmeticLanguage,
    SymbolLanguage,
    VocabularyLanguage,
    reset_languages,
)


@pytest.fixture
def symbols():
    return SymbolLanguage()


@pytest.fixture
def arith():
    return ArithmeticLanguage()


@pytest.fixture
def plus_x():
    """Only `+` and `x` are operators."""
    return VocabularyLanguage({"+", "x"}, name="plus-x")


@pytest.fixture
def fx():
    return VocabularyLanguage({"f", "g", "x", "y", "+", "*"}, name="fx")


@pytest.fixture
def clean_languages():
    reset_languages()
    yield
    reset_languages()


# ---------------------------------------------------------------------------
# Sample sources
# ---------------------------------------------------------------------------

GROUND_SOURCES = [
    "x",
    "(+ x x)",
    "(f (g x) y)",
    "(* (+ x y) (+ y x))",
    "(f)",
]

PATTERN_SOURCES = [
    "?a",
    "(+ ?a ?a)",
    "(f ?xs...)",
    "(f x (g ?y) ?rest...)",
]
