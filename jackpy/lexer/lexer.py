"""Lexer."""

import logging

from jackpy.diagnostics import Diagnostic, Severity
from jackpy.diagnostics.codes import (
    LEXER_INVALID_NUMBER,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from jackpy.lexer.tokens import KEYWORDS, SYMBOLS, Token, TokenKind
from jackpy.text import TextRange

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


class Lexer:
    """Single-pass scanner producing the non-trivia token sequence.

    Categories are tried in priority order keyword, symbol, integer constant,
    string constant, identifier. Keywords, integers and identifiers all start
    on a word character, so the scanner reads the whole word run once and
    classifies it, which keeps a keyword from matching a prefix of a longer
    name. Text that matches no category is skipped; a diagnostic is recorded
    but the lexer never raises.
    """

    def __init__(self, source: str, *, strip_comments: bool = True, strict: bool = False) -> None:
        self._source = source
        self._position = 0
        self._strip_comments = strip_comments
        self._skip_severity: Severity = "error" if strict else "warning"
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token | None:
        """Scan past any gap to the next token; `None` once input is exhausted."""
        while not self.is_eof:
            start = self._position
            kind = self._lex_token()
            if kind is not None:
                return Token(kind, self._source[start : self._position], TextRange(start, self._position))
        return None

    def lex(self) -> tuple[Token, ...]:
        tokens: list[Token] = []
        while (token := self.next_token()) is not None:
            tokens.append(token)
        logger.debug("Lexed %d tokens with %d diagnostics", len(tokens), len(self._diagnostics))
        return tuple(tokens)

    def _lex_token(self) -> TokenKind | None:
        ch = self._current_char()

        if ch.isspace():
            self._consume_whitespaces()
            return None

        if self._strip_comments and ch == "/" and self._peek_char() in ("/", "*"):
            self._skip_comment()
            return None

        if _is_word_char(ch):
            return self._lex_word()

        if ch in SYMBOLS:
            self._advance(1)
            return TokenKind.SYMBOL

        if ch == '"':
            return self._lex_string()

        self._skip_unrecognized()
        return None

    def _lex_word(self) -> TokenKind | None:
        start = self._position
        while not self.is_eof and _is_word_char(self._current_char()):
            self._advance(1)
        word = self._source[start : self._position]

        if word in KEYWORDS:
            return TokenKind.KEYWORD
        if word[0] in _DIGITS:
            if all(ch in _DIGITS for ch in word):
                return TokenKind.INTEGER_CONSTANT
            self._report(LEXER_INVALID_NUMBER, start)
            return None
        return TokenKind.IDENTIFIER

    def _lex_string(self) -> TokenKind | None:
        start = self._position
        end = start + 1
        while end < len(self._source) and self._source[end] not in ('"', "\n"):
            end += 1

        if end < len(self._source) and self._source[end] == '"':
            self._position = end + 1
            return TokenKind.STRING_CONSTANT

        # No closing quote on this line: only the quote itself is skipped.
        self._advance(1)
        self._report(LEXER_UNTERMINATED_STRING, start)
        return None

    def _skip_comment(self) -> None:
        start = self._position
        if self._peek_char() == "/":
            while not self.is_eof and self._current_char() != "\n":
                self._advance(1)
            return

        close = self._source.find("*/", start + 2)
        if close == -1:
            self._position = len(self._source)
            self._report(LEXER_UNTERMINATED_COMMENT, start)
            return
        self._position = close + 2

    def _skip_unrecognized(self) -> None:
        start = self._position
        while not self.is_eof:
            ch = self._current_char()
            if ch.isspace() or _is_word_char(ch) or ch in SYMBOLS or ch == '"':
                break
            self._advance(1)
        self._report(LEXER_UNRECOGNIZED_CHARACTER, start)

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _report(self, spec: DiagnosticSpec, start: int) -> None:
        self._diagnostics.append(
            spec.at(TextRange(start, self._position), severity=self._skip_severity)
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(source: str, *, strip_comments: bool = True, strict: bool = False) -> tuple[Token, ...]:
    """Tokenize `source`, discarding lexer diagnostics."""
    return Lexer(source, strip_comments=strip_comments, strict=strict).lex()


def token_text(source: str, token: Token) -> str:
    """Get the source slice a token was scanned from."""
    return source[token.range.start.value : token.range.end.value]


def dump_tokens(
    tokens: tuple[Token, ...] | list[Token],
    source: str,
    diagnostics: list[Diagnostic] | None = None,
) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
