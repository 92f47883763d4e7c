"""Error types for eqsat-pattern with source location context."""

from __future__ import annotations


class PatternError(Exception):
    """Base error with optional source location."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        loc = ""
        if line is not None:
            loc = f" (line {line}"
            if column is not None:
                loc += f", col {column}"
            loc += ")"
        super().__init__(f"{message}{loc}")


class ParseError(PatternError):
    """Raised when text cannot be turned into a pattern."""


class LexicalError(ParseError):
    """Raised when the text is not a well-formed S-expression."""


class EmptyTermError(ParseError):
    """Raised when a term is required but nothing was present."""


class EmptyListError(ParseError):
    """Raised for `()`: a list with no operator position."""


class MalformedAtomError(ParseError):
    """Raised when an atom token is empty or contains whitespace."""

    def __init__(self, token: str, line: int | None = None, column: int | None = None):
        self.token = token
        super().__init__(f"Malformed atom {token!r}", line, column)


class InvalidOperatorError(ParseError):
    """Raised when a token is not an operator of the target language."""

    def __init__(self, message: str, token: str, line: int | None = None, column: int | None = None):
        self.token = token
        super().__init__(message, line, column)


class InvalidAtomError(InvalidOperatorError):
    """Raised when a leaf atom is neither a wildcard nor an operator."""

    def __init__(self, token: str, line: int | None = None, column: int | None = None):
        super().__init__(f"Couldn't parse '{token}'", token, line, column)


class WildcardInGroundTermError(PatternError):
    """Raised when a wildcard is found where a concrete term is required."""

    def __init__(self, wildcard):
        self.wildcard = wildcard
        super().__init__(f"Found wildcard '{wildcard.name}' instead of enode term")
