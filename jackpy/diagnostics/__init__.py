"""Diagnostics."""

from jackpy.diagnostics.codes import (
    LEXER_INVALID_NUMBER,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_TRAILING_TOKENS,
    PARSER_UNEXPECTED_END_OF_INPUT,
    DiagnosticSpec,
)
from jackpy.diagnostics.diagnostic import (
    Diagnostic,
    Severity,
    collect_diagnostics,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "LEXER_INVALID_NUMBER",
    "LEXER_UNRECOGNIZED_CHARACTER",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_TRAILING_TOKENS",
    "PARSER_UNEXPECTED_END_OF_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
]
