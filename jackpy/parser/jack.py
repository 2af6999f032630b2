"""High-level parse entrypoint for Jack source text."""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import TYPE_CHECKING

from jackpy.diagnostics import Diagnostic, collect_diagnostics
from jackpy.diagnostics.codes import PARSER_TRAILING_TOKENS
from jackpy.lexer import Lexer, Token
from jackpy.parser.errors import LexicalError, ParseError
from jackpy.parser.grammar import parse_class
from jackpy.parser.options import ParseMode, ParserOptions
from jackpy.parser.parser import Parser
from jackpy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from jackpy.pipeline import JackParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def tokenize_source(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> tuple[tuple[Token, ...], list[Diagnostic]]:
    resolved_options = _resolve_options(options=options, mode=mode)
    lexer = Lexer(
        text,
        strip_comments=resolved_options.strip_comments,
        strict=resolved_options.is_strict,
    )
    tokens = lexer.lex()
    return tokens, lexer.diagnostics


def parse_tokens(
    tokens: tuple[Token, ...],
    options: ParserOptions | None = None,
    *,
    text_len: int = 0,
) -> tuple[str, list[Diagnostic]]:
    """Run the class grammar over `tokens`. Raises `ParseError` on the first violation."""
    parser = Parser(TokenSource(tokens, text_len=text_len), options=options)
    parse_class(parser)

    diagnostics: list[Diagnostic] = []
    trailing = parser.source.remaining
    if trailing:
        diagnostics.append(PARSER_TRAILING_TOKENS.at(trailing[0].range.cover(trailing[-1].range)))
    return parser.finish(), diagnostics


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> str:
    """Parse `text` and return the serialized tree, raising `ParseError` on failure."""
    return parse_result(text, options=options, mode=mode).unwrap()


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> JackParseResult:
    """Parse `text` into a result carrier; failures come back as values, never raised."""
    from jackpy.pipeline import JackParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    tokens, lexer_diagnostics = tokenize_source(text, options=resolved_options)

    lexer_errors = [d for d in lexer_diagnostics if d.severity == "error"]
    if lexer_errors:
        first = lexer_errors[0]
        token_starts = [token.range.start.value for token in tokens]
        error: ParseError = LexicalError(first, bisect_left(token_starts, first.range.start.value))
        return JackParseResult(
            source_text=text,
            tokens=tokens,
            output=None,
            diagnostics=list(lexer_diagnostics),
            options=resolved_options,
            error=error,
        )

    try:
        output, parser_diagnostics = parse_tokens(tokens, resolved_options, text_len=len(text))
    except ParseError as exc:
        logger.debug("Parse failed at token %d: %s", exc.token_index, exc)
        return JackParseResult(
            source_text=text,
            tokens=tokens,
            output=None,
            diagnostics=collect_diagnostics(lexer_diagnostics, [exc.diagnostic]),
            options=resolved_options,
            error=exc,
        )

    return JackParseResult(
        source_text=text,
        tokens=tokens,
        output=output,
        diagnostics=collect_diagnostics(lexer_diagnostics, parser_diagnostics),
        options=resolved_options,
    )
