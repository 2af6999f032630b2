"""Lexer."""

from jackpy.lexer.lexer import Lexer, dump_tokens, token_text, tokenize
from jackpy.lexer.tokens import KEYWORDS, SYMBOLS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "SYMBOLS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "tokenize",
]
