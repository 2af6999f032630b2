"""Fatal parse errors.

Every error aborts the parse; there is no recovery and no partial tree.
"""

from jackpy.diagnostics import Diagnostic
from jackpy.diagnostics.codes import PARSER_EXPECTED_TOKEN, PARSER_UNEXPECTED_END_OF_INPUT
from jackpy.lexer import Token, TokenKind
from jackpy.text import TextRange


class ParseError(Exception):
    """Base class for errors that abort a parse."""

    def __init__(self, diagnostic: Diagnostic, token_index: int) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.token_index = token_index


class UnexpectedEndOfInput(ParseError):
    """A rule needed another token but the sequence is exhausted."""

    def __init__(self, token_index: int, range: TextRange, *, expected: str | None = None) -> None:
        message = PARSER_UNEXPECTED_END_OF_INPUT.message
        if expected is not None:
            message = f"{message}, expected {expected}"
        super().__init__(PARSER_UNEXPECTED_END_OF_INPUT.at(range, message=message), token_index)
        self.expected = expected


class JackSyntaxError(ParseError):
    """The next token does not match what the grammar rule requires."""

    def __init__(self, token_index: int, actual: Token, expected_kind: TokenKind, expected_text: str | None) -> None:
        expected = describe_expected(expected_kind, expected_text)
        message = f"Expected {expected}, found {actual.describe()}"
        super().__init__(PARSER_EXPECTED_TOKEN.at(actual.range, message=message), token_index)
        self.actual = actual
        self.expected_kind = expected_kind
        self.expected_text = expected_text


class LexicalError(ParseError):
    """Strict mode only: the lexer skipped text it could not classify."""


def describe_expected(kind: TokenKind, text: str | None) -> str:
    if text is None:
        return kind.value
    return f"{kind.value} {text!r}"
