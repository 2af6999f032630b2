"""Parser infrastructure (token cursor + recursive-descent grammar + tree sink)."""

from jackpy.parser.errors import JackSyntaxError, LexicalError, ParseError, UnexpectedEndOfInput
from jackpy.parser.grammar import (
    parse_class,
    parse_class_var_dec,
    parse_parameter_list,
    parse_subroutine,
    parse_subroutine_body,
)
from jackpy.parser.jack import parse, parse_result, parse_tokens, tokenize_source
from jackpy.parser.marker import CompletedMarker, Marker
from jackpy.parser.options import ParseMode, ParserOptions
from jackpy.parser.parser import Parser
from jackpy.parser.token_source import TokenSource
from jackpy.parser.tree_sink import XmlTreeSink, escape_text, render_token, render_tokens

__all__ = [
    "CompletedMarker",
    "JackSyntaxError",
    "LexicalError",
    "Marker",
    "ParseError",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "UnexpectedEndOfInput",
    "XmlTreeSink",
    "escape_text",
    "parse",
    "parse_class",
    "parse_class_var_dec",
    "parse_parameter_list",
    "parse_result",
    "parse_subroutine",
    "parse_subroutine_body",
    "parse_tokens",
    "render_token",
    "render_tokens",
    "tokenize_source",
]
