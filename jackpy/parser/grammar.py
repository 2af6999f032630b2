"""Jack class-level grammar routines that write tree output as they consume."""

from dataclasses import replace

from jackpy.lexer import TokenKind
from jackpy.parser.marker import CompletedMarker
from jackpy.parser.parser import Parser
from jackpy.syntax import JackSyntaxKind

CLASS_VAR_KEYWORDS: frozenset[str] = frozenset({"static", "field"})
SUBROUTINE_KEYWORDS: frozenset[str] = frozenset({"constructor", "function", "method"})
PRIMITIVE_TYPES: frozenset[str] = frozenset({"int", "char", "boolean"})


def parse_class(parser: Parser) -> CompletedMarker:
    """class Name { classVarDec* subroutineDec* }"""
    marker = parser.start(JackSyntaxKind.CLASS)
    parser.consume(TokenKind.KEYWORD, "class")
    parser.consume(TokenKind.IDENTIFIER)
    parser.consume(TokenKind.SYMBOL, "{")

    while parser.at(TokenKind.KEYWORD, *CLASS_VAR_KEYWORDS):
        parse_class_var_dec(parser)

    while parser.at(TokenKind.KEYWORD, *SUBROUTINE_KEYWORDS):
        parse_subroutine(parser)

    parser.consume(TokenKind.SYMBOL, "}")
    return marker.complete(parser)


def parse_class_var_dec(parser: Parser) -> CompletedMarker:
    """(static | field) Type name (, name)* ;"""
    marker = parser.start(JackSyntaxKind.CLASS_VAR_DEC)
    parser.consume(TokenKind.KEYWORD)
    _consume_declared_type(parser)
    parser.consume(TokenKind.IDENTIFIER)

    while parser.at(TokenKind.SYMBOL, ","):
        parser.consume(TokenKind.SYMBOL, ",")
        parser.consume(TokenKind.IDENTIFIER)

    parser.consume(TokenKind.SYMBOL, ";")
    return marker.complete(parser)


def parse_subroutine(parser: Parser) -> CompletedMarker:
    """(constructor | function | method) returnType name ( parameterList ) body"""
    marker = parser.start(JackSyntaxKind.SUBROUTINE_DEC)
    parser.consume(TokenKind.KEYWORD)
    # Return types are keyword-only: `void`, `int`, ... but never a class name.
    parser.consume(TokenKind.KEYWORD)
    parser.consume(TokenKind.IDENTIFIER)
    parser.consume(TokenKind.SYMBOL, "(")
    parse_parameter_list(parser)
    parser.consume(TokenKind.SYMBOL, ")")
    parse_subroutine_body(parser)
    return marker.complete(parser)


def parse_parameter_list(parser: Parser) -> CompletedMarker:
    """Raw pass-through of every token before the closing `)`; no validation."""
    marker = parser.start(JackSyntaxKind.PARAMETER_LIST)
    while parser.peek() is not None and not parser.at(TokenKind.SYMBOL, ")"):
        parser.bump()
    return marker.complete(parser)


def parse_subroutine_body(parser: Parser) -> CompletedMarker:
    # TODO: varDec* and statements once the statement grammar is added.
    marker = parser.start(JackSyntaxKind.SUBROUTINE_BODY)
    parser.consume(TokenKind.SYMBOL, "{")
    parser.consume(TokenKind.SYMBOL, "}")
    return marker.complete(parser)


def _consume_declared_type(parser: Parser) -> None:
    # Declaration types occupy an identifier slot, so primitive type keywords
    # are written with the identifier tag.
    if parser.options.primitive_types_as_identifiers and parser.at(TokenKind.KEYWORD, *PRIMITIVE_TYPES):
        token = parser.advance()
        parser.emit(replace(token, kind=TokenKind.IDENTIFIER))
        return
    parser.consume(TokenKind.IDENTIFIER)
