"""Lexer tokens."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from jackpy.text import TextRange


class TokenKind(StrEnum):
    """Lexical categories, in classification priority order.

    Values double as the tag names written for each token.
    """

    KEYWORD = "keyword"
    SYMBOL = "symbol"
    INTEGER_CONSTANT = "integerConstant"
    STRING_CONSTANT = "stringConstant"
    IDENTIFIER = "identifier"


KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "class",
        "constructor",
        "function",
        "method",
        "field",
        "static",
        "var",
        "int",
        "char",
        "boolean",
        "void",
        "true",
        "false",
        "null",
        "this",
        "let",
        "do",
        "if",
        "else",
        "while",
        "return",
    }
)

SYMBOLS: Final[frozenset[str]] = frozenset("{}()[].,;+-*/&|<>=~")


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified lexeme.

    `text` is the lexeme exactly as scanned; string constants keep their quotes.
    """

    kind: TokenKind
    text: str
    range: TextRange

    def is_(self, kind: TokenKind, *texts: str) -> bool:
        """True when the token has `kind` and, if any texts are given, one of them."""
        if self.kind != kind:
            return False
        return not texts or self.text in texts

    def describe(self) -> str:
        return f"{self.kind.value} {self.text!r}"
