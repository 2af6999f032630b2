"""Jack syntax analyzer: tokenizer plus class-level recursive-descent parser."""

from jackpy.lexer import Token, TokenKind, tokenize
from jackpy.parser import (
    JackSyntaxError,
    LexicalError,
    ParseError,
    ParseMode,
    ParserOptions,
    UnexpectedEndOfInput,
    parse,
    parse_result,
)
from jackpy.pipeline import JackParseResult

__all__ = [
    "JackParseResult",
    "JackSyntaxError",
    "LexicalError",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "Token",
    "TokenKind",
    "UnexpectedEndOfInput",
    "parse",
    "parse_result",
    "tokenize",
]
